#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

from __future__ import annotations

from typing import Optional

from sqlalchemy import BigInteger, Column, Integer, Text

from logs_provider.db.context import Context
from logs_provider.db.mixin import Base
from logs_provider.utilities.provider_constants import LOGS_TABLE


class Log(Context().db_base, Base):
    """One log line written by the application. Rows are append only."""

    __tablename__ = LOGS_TABLE

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        nullable=False,
    )
    msg = Column(Text, nullable=False)
    # epoch milliseconds
    timestamp = Column(BigInteger, nullable=False, index=True)

    def __init__(self, msg: str, timestamp: int, id: Optional[int] = None):
        self.msg = msg
        self.timestamp = timestamp
        if id is not None:
            self.id = id
