#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

from contextlib import contextmanager
import logging

from flask import g, has_request_context
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from logs_provider.utilities.log_constants import _DEFAULT_LOGGER_NAME


class SingletonMetaClass(type):
    """
    SingletonMetaClass is for implementing singleton, pass in to the class by using metaclass=SingletonMetaClass
    """

    _instances = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super(SingletonMetaClass, cls).__call__(
                *args, **kwargs
            )
        return cls._instances[cls]


class Context(metaclass=SingletonMetaClass):
    """This class manages the database sessions"""

    def __init__(self):
        self.db_base = declarative_base()
        self.engine = None
        self.session = None
        self._session_factory = None

    def init_session(self, connection_str: str = "sqlite:///"):
        """set up the database connections, it will use sqlite if no connection_str is used

        Args:
            connection_str (str, optional): connection string to the db. Defaults to "sqlite:///".
        """
        if self.session is not None:
            self.session.close()
        if self.engine is not None:
            self.engine.dispose()
        self.engine = create_engine(connection_str, echo=False)
        self._session_factory = sessionmaker(bind=self.engine)
        self.session = self.create_new_session()  # create default session
        logging.getLogger(_DEFAULT_LOGGER_NAME).debug(
            f"database session initialised for {self.engine.url.render_as_string(hide_password=True)}"
        )

    def get_session(self) -> Session:
        """get session from either flask global object or existing singleton session

        Returns:
            Session: the request session inside a flask request, the default session otherwise
        """
        if self._session_factory is None:
            raise RuntimeError("Context().init_session() has not been called")
        if has_request_context():
            session = g.get("session", None)
            if session is not None:
                return session
        return self.session

    def create_new_session(self) -> Session:
        """creates new sqlalchemy session"""
        return self._session_factory()

    def before_flask_request(self):
        """This is part of the flask request cycle, it creates a new database session for every request"""
        g.session = self.create_new_session()

    def after_flask_request(self, exc=None):
        """This is part of the flask life cycle, it commits and closes the db session at the end of flask request.
        The session is rolled back instead when the request raised.
        """
        session = g.pop("session", None)
        if session is None:
            return
        try:
            if exc is None:
                session.commit()
            else:
                session.rollback()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    @contextmanager
    def session_scope(self):
        """Provide a transactional scope around a series of operations.

        Yields:
            Session: the current session, committed on success and rolled back on error
        """
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_tables(self):
        """create tables by using sqlalchemy context"""
        self.db_base.metadata.create_all(self.engine)

    def drop_tables(self):
        """drop tables by using sqlalchemy context"""
        self.db_base.metadata.drop_all(self.engine)
