#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

from __future__ import annotations

from typing import List, Optional, Tuple
from urllib.parse import urlsplit

from logs_provider.exceptions import UnrecognizedAddress
from logs_provider.utilities.provider_constants import CONTENT_SCHEME, NO_MATCH

# path segment wildcards: "#" matches an integer (optionally negative), "*" matches any one segment
_NUMBER = "#"
_TEXT = "*"


def split_uri(uri: str) -> Optional[Tuple[str, Tuple[str, ...]]]:
    """split a content uri into (authority, path segments)

    "content://" is optional, "authority/logs/3" and "content://authority/logs/3" are the same address.
    Query string, fragment and empty path segments are ignored.

    Returns:
        Optional[Tuple[str, Tuple[str, ...]]]: None when the uri is not a content uri
    """
    if not isinstance(uri, str):
        return None
    uri = uri.strip()
    if "://" not in uri:
        uri = f"{CONTENT_SCHEME}://{uri}"
    try:
        parts = urlsplit(uri)
    except ValueError:
        return None
    if parts.scheme != CONTENT_SCHEME or not parts.netloc:
        return None
    segments = tuple(s for s in parts.path.split("/") if s)
    return parts.netloc, segments


def parse_id(uri: str) -> int:
    """the trailing path segment of uri as an integer, -1 if the uri has no path

    Raises:
        ValueError: the trailing segment is not a number
    """
    split = split_uri(uri)
    if split is None or not split[1]:
        return -1
    return int(split[1][-1])


def _segment_matches(pattern: str, segment: str) -> bool:
    if pattern == _NUMBER:
        digits = segment[1:] if segment.startswith("-") else segment
        return digits.isascii() and digits.isdigit()
    if pattern == _TEXT:
        return True
    return pattern == segment


class UriMatcher:
    """classifies content uris against patterns registered with add_uri.

    Patterns are tried in registration order, the first one that matches wins.
    """

    def __init__(self, no_match: int = NO_MATCH):
        self.no_match = no_match
        self._patterns: List[Tuple[str, Tuple[str, ...], int]] = []

    def add_uri(self, authority: str, path: str, code: int):
        if code < 0:
            raise ValueError(f"match code must be positive, got {code}")
        segments = tuple(s for s in (path or "").split("/") if s)
        self._patterns.append((authority, segments, code))

    def match(self, uri: str) -> int:
        """code of the first registered pattern matching uri, no_match otherwise"""
        split = split_uri(uri)
        if split is None:
            return self.no_match
        authority, segments = split
        for pattern_authority, pattern_segments, code in self._patterns:
            if pattern_authority != authority or len(pattern_segments) != len(segments):
                continue
            if all(_segment_matches(p, s) for p, s in zip(pattern_segments, segments)):
                return code
        return self.no_match

    def classify(self, uri: str) -> int:
        """same as match but raises when nothing matches

        Raises:
            UnrecognizedAddress: uri matches none of the registered patterns
        """
        code = self.match(uri)
        if code == self.no_match:
            raise UnrecognizedAddress(uri)
        return code
