# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from voidfeed.shared.logging import logger

from .base import AppError, FaultClass

STATUS_BY_FAULT: dict[FaultClass, HTTPStatus] = {
    FaultClass.CLIENT_INPUT: HTTPStatus.BAD_REQUEST,
    FaultClass.AUTHORIZATION: HTTPStatus.UNAUTHORIZED,
    FaultClass.NOT_FOUND: HTTPStatus.NOT_FOUND,
    FaultClass.SERVER: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def status_for(error: AppError) -> HTTPStatus:
    return STATUS_BY_FAULT.get(error.fault, HTTPStatus.INTERNAL_SERVER_ERROR)


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    status = status_for(error)
    if error.fault is FaultClass.SERVER:
        # internal detail stays in the logs
        response = jsonify({"error": "internal_error", "kind": FaultClass.SERVER.value})
    else:
        response = jsonify(error.to_dict())
    return response, status


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.fault is FaultClass.SERVER:
            logger.error(
                f"Server fault {exc.code} on {request.method} {request.path} "
                f"context={dict(exc.context or {})} cause={exc.__cause__!r}"
            )
        else:
            logger.warning(
                f"Handled application error {exc.code} on {request.method} {request.path}"
            )
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        ip_address = (
            request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
            or request.remote_addr
            or "unknown"
        )
        user_id = getattr(g, "user_id", None)

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {ip_address}, user={user_id}, "
                f"query={dict(request.args)}, body_size={len(request.data)}"
            )
        else:
            logger.exception(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        response = jsonify({"error": "internal_error", "kind": FaultClass.SERVER.value})
        return response, default_status
