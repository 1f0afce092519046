#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

"""
Exceptions raised by the logs provider.

They are used across:

  - provider/ (address matching and the read-only query surface)
  - db/services/ (store writes)
  - apis/v1/ (mapped to http error responses)

Every error propagates to the immediate caller. Nothing here is retried.
"""


class LogsProviderError(Exception):
    """Base class for all logs provider errors."""


class UnrecognizedAddress(LogsProviderError, ValueError):
    """
    Raised by the uri matcher when an identifier matches none of the
    registered patterns.
    """

    def __init__(self, uri):
        self.uri = uri
        super().__init__(f"Unrecognized address: {uri}")


class InvalidAddress(LogsProviderError, ValueError):
    """
    Raised by the query surface when asked for a uri it does not serve.
    The request is rejected, not answered with an empty result.
    """

    def __init__(self, uri):
        self.uri = uri
        super().__init__(f"Unknown URI: {uri}")


class OperationNotSupported(LogsProviderError):
    """
    Raised for any write-shaped call (insert, update, delete, get_type)
    on the query surface. The store is never reached.
    """

    def __init__(self, operation, uri=None):
        self.operation = operation
        self.uri = uri
        super().__init__(f"Only reading operations are allowed (got {operation})")


class StoreWriteError(LogsProviderError):
    """
    Raised when the database rejects a write, e.g. a duplicate primary key.
    The underlying SQLAlchemy error is chained as __cause__.
    """

    def __init__(self, operation, details=None):
        self.operation = operation
        self.details = details or "The store rejected the write."
        super().__init__(f"{operation} failed: {self.details}")
