#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from logs_provider.db.context import Context
from logs_provider.db.models import Log
from logs_provider.exceptions import StoreWriteError
from logs_provider.utilities.log_constants import _DEFAULT_LOGGER_NAME
from logs_provider.utilities.provider_constants import _MAX_ROW_ID

_DEFAULT_BATCH_SIZE = 500


class LogService:
    """Data access for the logs table. The only code allowed to touch it.

    Every method runs on the given session, or on Context().get_session() when none is passed.
    Writes are flushed, not committed; the caller's session scope owns the transaction.
    """

    def get_all_logs(self, session: Optional[Session] = None) -> List[Log]:
        session = session or Context().get_session()
        return list(session.execute(select(Log).order_by(Log.id.desc())).scalars())

    def iter_all_logs(
        self, session: Optional[Session] = None, *, batch_size: int = _DEFAULT_BATCH_SIZE
    ) -> Iterator[Log]:
        """stream the logs newest first without loading the whole table.

        The query runs when iteration starts, so calling this again restarts from the newest row.
        """
        session = session or Context().get_session()
        result = session.execute(
            select(Log).order_by(Log.id.desc()).execution_options(yield_per=batch_size)
        )
        for log in result.scalars():
            yield log

    def get_log_by_id(self, log_id: int, session: Optional[Session] = None) -> Optional[Log]:
        if not 0 <= log_id <= _MAX_ROW_ID:
            return None
        session = session or Context().get_session()
        return session.execute(select(Log).where(Log.id == log_id)).scalars().first()

    def count_logs(self, session: Optional[Session] = None) -> int:
        session = session or Context().get_session()
        return session.execute(select(func.count()).select_from(Log)).scalar_one()

    def insert_logs(self, *logs: Log, session: Optional[Session] = None) -> List[Log]:
        """add one or more logs, ids are assigned by the database on flush

        Raises:
            ValueError: no logs were given
            StoreWriteError: the database rejected the insert, the session transaction is rolled back
        """
        if not logs:
            raise ValueError("insert_logs needs at least one log")
        session = session or Context().get_session()
        try:
            session.add_all(logs)
            session.flush()  # get log.id
        except SQLAlchemyError as e:
            session.rollback()
            logging.getLogger(_DEFAULT_LOGGER_NAME).error(f"failed to insert {len(logs)} logs: {e}")
            raise StoreWriteError("insert_logs", str(getattr(e, "orig", None) or e)) from e
        return list(logs)

    def delete_logs(self, session: Optional[Session] = None) -> int:
        """remove every log in a single statement, returns the number of deleted rows"""
        session = session or Context().get_session()
        try:
            result = session.execute(delete(Log))
        except SQLAlchemyError as e:
            session.rollback()
            logging.getLogger(_DEFAULT_LOGGER_NAME).error(f"failed to delete logs: {e}")
            raise StoreWriteError("delete_logs", str(getattr(e, "orig", None) or e)) from e
        return result.rowcount
