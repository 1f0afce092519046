#!/usr/bin/env python3
# -*- coding: utf-8 -*-
###############################################################################
# Copyright (C) Caterpillar Inc. All Rights Reserved.
# Caterpillar: Confidential Yellow
###############################################################################

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, jsonify, request

from logs_provider.db.container import Container
from logs_provider.exceptions import InvalidAddress, OperationNotSupported
from logs_provider.provider.logs_provider import LogsContentProvider
from logs_provider.utilities.datetime_format import format_timestamp
from logs_provider.utilities.provider_constants import CONTENT_SCHEME

bp_logs = Blueprint("logs", __name__, url_prefix="/content")

_WRITE_OPERATIONS = {"POST": "insert", "PUT": "update", "PATCH": "update", "DELETE": "delete"}


def _content_uri(authority: str, path: str) -> str:
    return f"{CONTENT_SCHEME}://{authority}/{path}"


def _row_to_json(row: dict) -> dict:
    return {**row, "date": format_timestamp(row["timestamp"])}


@bp_logs.errorhandler(InvalidAddress)
def handle_invalid_address(e: InvalidAddress):
    return jsonify({"error": str(e), "uri": e.uri}), 400


@bp_logs.errorhandler(OperationNotSupported)
def handle_operation_not_supported(e: OperationNotSupported):
    return jsonify({"error": str(e), "uri": e.uri}), 405


@bp_logs.route("/<authority>/<path:path>", methods=["GET"])
@inject
def query_logs(
    authority: str,
    path: str,
    provider: LogsContentProvider = Provide[Container.logs_provider],
):
    """
    GET /content/com.example.android.hilt.provider/logs     -> all logs, newest first
    GET /content/com.example.android.hilt.provider/logs/42  -> log 42, or an empty result
    projection/selection/sort_order query args are passed through and ignored by the provider
    """
    uri = _content_uri(authority, path)
    cursor = provider.query(
        uri,
        projection=request.args.getlist("projection") or None,
        selection=request.args.get("selection"),
        selection_args=request.args.getlist("selection_args") or None,
        sort_order=request.args.get("sort_order"),
    )
    with cursor:
        results = [_row_to_json(row) for row in cursor]
    return jsonify({"uri": uri, "count": len(results), "results": results})


@bp_logs.route("/<authority>/<path:path>", methods=["POST", "PUT", "PATCH", "DELETE"])
@inject
def write_logs(
    authority: str,
    path: str,
    provider: LogsContentProvider = Provide[Container.logs_provider],
):
    """writes are not served, the provider rejects them with OperationNotSupported -> 405"""
    operation = getattr(provider, _WRITE_OPERATIONS[request.method])
    return jsonify({"result": operation(_content_uri(authority, path))})


@bp_logs.route("/type/<authority>/<path:path>", methods=["GET"])
@inject
def get_logs_type(
    authority: str,
    path: str,
    provider: LogsContentProvider = Provide[Container.logs_provider],
):
    return jsonify({"type": provider.get_type(_content_uri(authority, path))})
