#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

from __future__ import annotations

import logging
from typing import List

from logs_provider.db.context import Context
from logs_provider.db.models import Log
from logs_provider.db.services.log_service import LogService
from logs_provider.provider.notifications import ChangeNotifier
from logs_provider.utilities.datetime_format import now_millis
from logs_provider.utilities.log_constants import _DEFAULT_LOGGER_NAME


class LoggerService:
    """In-process writer for the logs table.

    Each write runs in its own session scope and notifies the collection uri once committed,
    so cursors handed out by the provider learn about it.
    """

    def __init__(self, log_service: LogService, notifier: ChangeNotifier, content_uri: str):
        self.log_service = log_service
        self.notifier = notifier
        self.content_uri = content_uri

    def add_log(self, msg: str) -> dict:
        """store msg stamped with the current time, returns the stored row"""
        with Context().session_scope() as session:
            log = Log(msg=msg, timestamp=now_millis())
            self.log_service.insert_logs(log, session=session)
            row = log.to_dict()
        logging.getLogger(_DEFAULT_LOGGER_NAME).debug(f"added log {row['id']}")
        self.notifier.notify_change(self.content_uri)
        return row

    def get_all_logs(self) -> List[dict]:
        with Context().session_scope() as session:
            return [log.to_dict() for log in self.log_service.get_all_logs(session=session)]

    def remove_logs(self) -> int:
        with Context().session_scope() as session:
            deleted = self.log_service.delete_logs(session=session)
        logging.getLogger(_DEFAULT_LOGGER_NAME).info(f"removed {deleted} logs")
        self.notifier.notify_change(self.content_uri)
        return deleted
