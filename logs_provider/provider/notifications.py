#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

from __future__ import annotations

import itertools
import logging
import threading
from typing import Callable, Dict, List, Tuple

from blinker import Signal

from logs_provider.provider.uri_matcher import split_uri
from logs_provider.utilities.log_constants import _DEFAULT_LOGGER_NAME

ChangeCallback = Callable[[str], None]


def _address(uri: str) -> Tuple[str, Tuple[str, ...]]:
    split = split_uri(uri)
    if split is None:
        raise ValueError(f"not a content uri: {uri}")
    return split


def _is_related(watched, changed, notify_for_descendants: bool) -> bool:
    """a change reaches observers of the same uri, of any descendant, and of ancestors that asked for descendants"""
    if watched[0] != changed[0]:
        return False
    watched_path, changed_path = watched[1], changed[1]
    if watched_path == changed_path:
        return True
    if changed_path[: len(watched_path)] == watched_path:
        # changed uri is below the watched one
        return notify_for_descendants
    return watched_path[: len(changed_path)] == changed_path


class ChangeNotifier:
    """Publish/subscribe channel for "the data behind this uri changed".

    Readers register an observer for the uri a result set came from,
    writers call notify_change after they commit.
    """

    def __init__(self):
        self._signal = Signal("content-changed")
        self._receivers: Dict[int, Tuple[str, Callable]] = {}
        self._handles = itertools.count()
        # registration may happen from concurrent request threads
        self._lock = threading.Lock()

    def register_observer(
        self, uri: str, callback: ChangeCallback, notify_for_descendants: bool = True
    ) -> int:
        """call callback(changed_uri) whenever uri or a related uri changes

        Returns:
            int: handle for unregister_observer
        """
        watched = _address(uri)

        def receiver(sender, changed_uri: str, **kwargs) -> bool:
            changed = split_uri(changed_uri)
            if changed is None or not _is_related(watched, changed, notify_for_descendants):
                return False
            callback(changed_uri)
            return True

        with self._lock:
            handle = next(self._handles)
            self._receivers[handle] = (uri, receiver)
            self._signal.connect(receiver, weak=False)
        return handle

    def unregister_observer(self, handle: int) -> bool:
        with self._lock:
            entry = self._receivers.pop(handle, None)
            if entry is None:
                return False
            self._signal.disconnect(entry[1])
        return True

    def watched_uris(self) -> List[str]:
        with self._lock:
            return [uri for uri, _ in self._receivers.values()]

    def notify_change(self, uri: str) -> int:
        """tell every related observer that uri changed, returns how many were called"""
        _address(uri)
        results = self._signal.send(self, changed_uri=uri)
        notified = sum(1 for _, fired in results if fired)
        logging.getLogger(_DEFAULT_LOGGER_NAME).debug(f"change on {uri} notified {notified} observers")
        return notified
