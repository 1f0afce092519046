#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

# authority of the logs content provider
AUTHORITY = "com.example.android.hilt.provider"
CONTENT_SCHEME = "content"

# table exposed by the provider
LOGS_TABLE = "logs"

# match codes for the logs table
NO_MATCH = -1
CODE_LOGS_DIR = 1
CODE_LOGS_ITEM = 2

# largest id a sqlite INTEGER column can hold
_MAX_ROW_ID = 2 ** 63 - 1
