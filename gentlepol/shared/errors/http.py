# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request

from gentlepol.shared.logging import logger

from .base import AppError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def _describe(exc: AppError) -> str:
    text = f"{type(exc).__name__} ({exc.code}) on {request.method} {request.path}"
    if exc.detail:
        text += f": {exc.detail}"
    return text


def register_error_handler(app: Flask, *, debug_mode: bool = False) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        # Clients only see the collapsed code; the concrete class goes to the log.
        if exc.is_server_error:
            logger.error(f"Application error {_describe(exc)}")
        else:
            logger.warning(f"Handled {_describe(exc)}")
        return handle_app_error(exc)

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        user_id = getattr(g, "user_id", None)

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"user={user_id}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        return jsonify({"error": "internal_error"}), HTTPStatus.INTERNAL_SERVER_ERROR


__all__ = ["handle_app_error", "register_error_handler"]
