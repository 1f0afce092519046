#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

_DEFAULT_LOGGER_NAME = "logs_provider"
_DEFAULT_LOG_LEVEL = "INFO"
