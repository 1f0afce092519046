#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

"""
Read-only content provider over the application's logs table.

  - db/        sqlalchemy context, models, container and services
  - provider/  uri matching, the query surface, cursors and change notification
  - apis/      flask app factory and the v1 http blueprint
"""

__version__ = "1.0.0"
