# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from typing import Any

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from gentlepol.application.use_cases.users.login_user import LoginUserUseCase
from gentlepol.application.use_cases.users.register_user import RegisterUserUseCase
from gentlepol.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    LoginRequestDTO,
    LoginSuccessDTO,
    RegisterRequestDTO,
)
from gentlepol.shared.config import SecurityConfig
from gentlepol.shared.errors.validation import raise_validation_error
from gentlepol.shared.logging import logger


def _credentials_payload() -> dict[str, Any]:
    """JSON body, or a classic form post with ``username`` and ``password`` fields."""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        security: SecurityConfig,
        session_ttl: timedelta,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._security = security
        self._session_ttl = session_ttl

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(_credentials_payload())
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.register: responded (user_id={user.id})")
        return jsonify(AuthSuccessDTO().model_dump()), 200

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(_credentials_payload())
        except ValidationError as exc:
            raise_validation_error(exc)

        # NoSuchUserError and WrongPasswordError both render as invalid_credentials.
        token = self._login_use_case.execute(dto.username, dto.password)

        response = jsonify(LoginSuccessDTO(token=token).model_dump())
        response.set_cookie(
            self._security.session_cookie_name,
            token,
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
            max_age=int(self._session_ttl.total_seconds()),
        )
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
