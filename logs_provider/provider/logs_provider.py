#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

from __future__ import annotations

from functools import cached_property
import logging
from typing import Optional, Sequence

from logs_provider.db.context import Context
from logs_provider.db.models import Log
from logs_provider.db.services.log_service import LogService
from logs_provider.exceptions import InvalidAddress, OperationNotSupported, UnrecognizedAddress
from logs_provider.provider.cursor import LogCursor
from logs_provider.provider.notifications import ChangeNotifier
from logs_provider.provider.uri_matcher import UriMatcher, parse_id
from logs_provider.utilities.log_constants import _DEFAULT_LOGGER_NAME
from logs_provider.utilities.provider_constants import (AUTHORITY, CODE_LOGS_DIR,
                                                        CODE_LOGS_ITEM, CONTENT_SCHEME,
                                                        LOGS_TABLE)


class LogsContentProvider:
    """Exposes the logs table outside the process, read only.

    content://<authority>/logs      all logs, newest first
    content://<authority>/logs/<id> the log with that id, or nothing

    Every write-shaped call is rejected before it reaches the store.
    """

    def __init__(
        self,
        log_service: LogService,
        notifier: ChangeNotifier,
        authority: str = AUTHORITY,
        table: str = LOGS_TABLE,
    ):
        self.log_service = log_service
        self.notifier = notifier
        self.authority = authority
        self.table = table

    @cached_property
    def matcher(self) -> UriMatcher:
        matcher = UriMatcher()
        matcher.add_uri(self.authority, self.table, CODE_LOGS_DIR)
        matcher.add_uri(self.authority, f"{self.table}/#", CODE_LOGS_ITEM)
        return matcher

    @property
    def content_uri(self) -> str:
        """uri of the whole logs collection, the one writers notify"""
        return f"{CONTENT_SCHEME}://{self.authority}/{self.table}"

    def query(
        self,
        uri: str,
        projection: Optional[Sequence[str]] = None,
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[str]] = None,
        sort_order: Optional[str] = None,
    ) -> LogCursor:
        """Queries all the logs or an individual log from the logs database.

        projection, selection, selection_args and sort_order are accepted for
        compatibility and ignored, rows always come back ordered by id descending.

        Raises:
            InvalidAddress: uri is neither the logs collection nor a single log
        """
        logger = logging.getLogger(_DEFAULT_LOGGER_NAME)
        try:
            code = self.matcher.classify(uri)
        except UnrecognizedAddress as e:
            logger.warning(f"rejected query for unknown uri {uri}")
            raise InvalidAddress(uri) from e

        if any(hint is not None for hint in (projection, selection, selection_args, sort_order)):
            logger.debug(f"ignoring filter/order hints for {uri}")

        # own session, never commits, so the caller's pending work stays the caller's
        session = Context().create_new_session()
        try:
            if code == CODE_LOGS_DIR:
                logs = self.log_service.get_all_logs(session=session)
            else:
                log = self.log_service.get_log_by_id(parse_id(uri), session=session)
                logs = [log] if log is not None else []
            rows = [log.to_dict() for log in logs]
        finally:
            session.close()

        logger.debug(f"query {uri} returned {len(rows)} rows")
        cursor = LogCursor(Log.column_names(), rows)
        cursor.set_notification_uri(self.notifier, uri)
        return cursor

    def insert(self, uri: str, values: Optional[dict] = None):
        raise self._reject("insert", uri)

    def update(
        self,
        uri: str,
        values: Optional[dict] = None,
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[str]] = None,
    ) -> int:
        raise self._reject("update", uri)

    def delete(
        self, uri: str, selection: Optional[str] = None, selection_args: Optional[Sequence[str]] = None
    ) -> int:
        raise self._reject("delete", uri)

    def get_type(self, uri: str) -> Optional[str]:
        raise self._reject("get_type", uri)

    def _reject(self, operation: str, uri: str) -> OperationNotSupported:
        logging.getLogger(_DEFAULT_LOGGER_NAME).warning(f"rejected {operation} on {uri}")
        return OperationNotSupported(operation, uri)
