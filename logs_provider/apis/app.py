#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

import logging
from typing import Any, Dict, Optional

from flask import Flask

from logs_provider.apis.v1 import logs
from logs_provider.db.container import Container
from logs_provider.db.context import Context
from logs_provider.utilities.log_constants import _DEFAULT_LOGGER_NAME


def load_config(container: Container, overrides: Optional[Dict[str, Any]] = None):
    """environment first, explicit overrides win"""
    config = container.config
    config.database_uri.from_env("SQLALCHEMY_DATABASE_URI", default=config.database_uri())
    config.authority.from_env("LOGS_PROVIDER_AUTHORITY", default=config.authority())
    config.log_level.from_env("LOGS_PROVIDER_LOG_LEVEL", default=config.log_level())
    if overrides:
        config.from_dict(overrides)


def create_app(config: Optional[Dict[str, Any]] = None, container: Optional[Container] = None) -> Flask:
    container = container or Container()
    load_config(container, config)

    logger = logging.getLogger(_DEFAULT_LOGGER_NAME)
    logger.setLevel(container.config.log_level().upper())

    # init the global engine + default session once for this process, then make sure the table exists
    ctx = Context()
    ctx.init_session(container.config.database_uri())
    ctx.create_tables()

    app = Flask(__name__)
    app.container = container

    # every request gets its own db session, committed (or rolled back on error) and closed at teardown
    app.before_request(ctx.before_flask_request)
    app.teardown_request(ctx.after_flask_request)

    container.wire(modules=[logs])
    app.register_blueprint(logs.bp_logs)

    @app.get("/healthz")
    def healthz():
        return {"status": "ok", "authority": container.config.authority()}

    logger.info(f"logs provider serving content://{container.config.authority()}/{container.config.table()}")
    return app


if __name__ == "__main__":
    logging.basicConfig(format="%(asctime)s %(name)s %(levelname)s %(message)s")
    # no reloader, a second process would lose the initialised Context
    create_app().run(host="0.0.0.0", port=9999, debug=False, use_reloader=False)
