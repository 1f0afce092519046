#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

from datetime import datetime, timezone
import time


def now_millis() -> int:
    """current time as epoch milliseconds, the unit Log.timestamp is stored in"""
    return int(time.time() * 1000)


def format_timestamp(timestamp_ms: int, tz: timezone = timezone.utc) -> str:
    """render epoch milliseconds for display, e.g. 7 Mar 2021 14:03:09

    Args:
        timestamp_ms (int): epoch milliseconds
        tz (timezone, optional): display timezone. Defaults to UTC.
    """
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=tz)
    return "{} {}".format(moment.day, moment.strftime("%b %Y %H:%M:%S"))
