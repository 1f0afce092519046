#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Sequence

from logs_provider.provider.notifications import ChangeCallback, ChangeNotifier


class LogCursor:
    """Materialized, read-only result of a provider query.

    Rows are plain dicts keyed by column name so they outlive the session they were read with.
    set_notification_uri watches the uri the rows were read from; once the data behind it changes
    the cursor is marked changed and its own observers are called. close() stops watching.
    """

    def __init__(self, columns: Sequence[str], rows: List[Dict[str, Any]]):
        self.columns = list(columns)
        self._rows = rows
        self.notification_uri: Optional[str] = None
        self._notifier: Optional[ChangeNotifier] = None
        self._watch_handle: Optional[int] = None
        self._observers: List[ChangeCallback] = []
        self.changed = False
        self.closed = False

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self._rows)

    def __getitem__(self, position: int) -> Dict[str, Any]:
        return self._rows[position]

    @property
    def count(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> List[Dict[str, Any]]:
        return list(self._rows)

    def column_values(self, column: str) -> List[Any]:
        if column not in self.columns:
            raise KeyError(f"no column {column!r}, have {self.columns}")
        return [row[column] for row in self._rows]

    def set_notification_uri(self, notifier: ChangeNotifier, uri: str):
        """watch uri on notifier for changes to the rows behind this cursor, replacing any earlier uri"""
        if self.closed:
            raise RuntimeError("cursor is closed")
        self._stop_watching()
        self._notifier = notifier
        self.notification_uri = uri
        self._watch_handle = notifier.register_observer(uri, self._on_change)

    def _on_change(self, changed_uri: str):
        self.changed = True
        for callback in list(self._observers):
            callback(changed_uri)

    def _stop_watching(self):
        if self._notifier is not None and self._watch_handle is not None:
            self._notifier.unregister_observer(self._watch_handle)
        self._watch_handle = None

    def register_observer(self, callback: ChangeCallback):
        """call callback(changed_uri) when the data behind the notification uri changes"""
        if self._notifier is None or self.notification_uri is None:
            raise RuntimeError("cursor has no notification uri")
        if self.closed:
            raise RuntimeError("cursor is closed")
        self._observers.append(callback)

    def unregister_observer(self, callback: ChangeCallback) -> bool:
        try:
            self._observers.remove(callback)
        except ValueError:
            return False
        return True

    def close(self):
        """drop the rows and stop watching the notification uri"""
        self._stop_watching()
        self._observers = []
        self._rows = []
        self.closed = True

    def __enter__(self) -> LogCursor:
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
