# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from gentlepol.shared.errors import register_error_handler


def _http_error_code(exc: HTTPException) -> str:
    # "Method Not Allowed" -> "method_not_allowed"
    return (exc.name or "http_error").lower().replace(" ", "_")


def configure_error_handling(app: Flask, *, debug_mode: bool = False) -> None:
    """Render every failure, including unknown routes, as a JSON ``{"error": ...}`` body."""
    register_error_handler(app, debug_mode=debug_mode)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        response = exc.get_response()
        response.data = jsonify({"error": _http_error_code(exc)}).get_data()
        response.content_type = "application/json"
        return response
