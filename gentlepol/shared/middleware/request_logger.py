# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time

from flask import Flask, Response, g, request

from gentlepol.shared.logging import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    new_correlation_id,
    set_correlation_id,
)

_SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-auth-token"})
_CORRELATION_HEADER = "X-Request-ID"


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _visible_headers() -> dict[str, str]:
    return {
        key: "<redacted>" if key.lower() in _SENSITIVE_HEADERS else value
        for key, value in request.headers.items()
    }


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    """Log each request's start and outcome under a per-request correlation id.

    An incoming ``X-Request-ID`` is reused and echoed back, so a client can
    match its call to the server log.
    """

    @app.before_request
    def _before_request() -> None:
        set_correlation_id(request.headers.get(_CORRELATION_HEADER) or new_correlation_id())
        g.request_start_time = time.perf_counter()

        if debug_mode:
            logger.debug(
                f"Request started: {request.method} {request.path} from {_client_ip()}, "
                f"headers={_visible_headers()}, body_size={len(request.data)}"
            )
        else:
            logger.info(f"Request: {request.method} {request.path} from {_client_ip()}")

    @app.after_request
    def _after_request(response: Response) -> Response:
        duration = time.perf_counter() - getattr(g, "request_start_time", time.perf_counter())
        logger.info(
            f"Response: {request.method} {request.path} "
            f"status={response.status_code}, duration={duration:.3f}s"
        )
        correlation_id = get_correlation_id()
        if correlation_id != "-":
            response.headers.setdefault(_CORRELATION_HEADER, correlation_id)
        return response

    @app.teardown_request
    def _teardown_request(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"Request error: {type(exc).__name__} on {request.method} {request.path}")
        clear_correlation_id()


__all__ = ["configure_request_logging"]
