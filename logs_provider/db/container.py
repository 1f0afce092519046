#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

from dependency_injector import containers, providers

from logs_provider.db.services.log_service import LogService
from logs_provider.db.services.logger_service import LoggerService
from logs_provider.provider.logs_provider import LogsContentProvider
from logs_provider.provider.notifications import ChangeNotifier
from logs_provider.utilities.log_constants import _DEFAULT_LOG_LEVEL
from logs_provider.utilities.provider_constants import AUTHORITY, LOGS_TABLE


class Container(containers.DeclarativeContainer):
    """wires the logs provider, its store accessor and the change notifier together"""

    config = providers.Configuration(
        default={
            "database_uri": "sqlite:///logs.db",
            "authority": AUTHORITY,
            "table": LOGS_TABLE,
            "log_level": _DEFAULT_LOG_LEVEL,
        }
    )

    change_notifier = providers.Singleton(ChangeNotifier)

    log_service = providers.Factory(LogService)

    logs_provider = providers.Singleton(
        LogsContentProvider,
        log_service=log_service,
        notifier=change_notifier,
        authority=config.authority,
        table=config.table,
    )

    logger_service = providers.Singleton(
        LoggerService,
        log_service=log_service,
        notifier=change_notifier,
        content_uri=logs_provider.provided.content_uri,
    )
