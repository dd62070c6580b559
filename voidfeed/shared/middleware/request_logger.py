# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
import time

from flask import Flask, Response, g, request

from voidfeed.shared.logging import clear_correlation_id, logger, set_correlation_id

REQUEST_ID_HEADER = "X-Request-ID"
_HIDDEN_HEADERS = frozenset({"authorization", "cookie"})


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _visible_headers() -> dict[str, str]:
    return {
        key: ("<hidden>" if key.lower() in _HIDDEN_HEADERS else value)
        for key, value in request.headers.items()
    }


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    """Tag every request with a correlation id and log its start and outcome.

    The id is taken from an incoming ``X-Request-ID`` header when present and
    echoed back on the response.
    """

    @app.before_request
    def _before_request() -> None:
        correlation_id = request.headers.get(REQUEST_ID_HEADER) or secrets.token_urlsafe(8)
        set_correlation_id(correlation_id)
        g.correlation_id = correlation_id
        g.request_start_time = time.perf_counter()

        if debug_mode:
            logger.debug(
                f"Request started: {request.method} {request.path} from {_client_ip()}, "
                f"headers={_visible_headers()}, body_size={request.content_length or 0}"
            )
        else:
            logger.info(f"Request: {request.method} {request.path} from {_client_ip()}")

    @app.after_request
    def _after_request(response: Response) -> Response:
        started = getattr(g, "request_start_time", None)
        duration = time.perf_counter() - started if started is not None else 0.0
        user_id = getattr(g, "user_id", None)

        logger.info(
            f"Response: {request.method} {request.path} status={response.status_code} "
            f"duration={duration:.3f}s user={user_id or '-'}"
        )
        response.headers.setdefault(REQUEST_ID_HEADER, getattr(g, "correlation_id", "-"))
        return response

    @app.teardown_request
    def _teardown_request(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"Request error: {type(exc).__name__} on {request.method} {request.path}")
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
