# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, Protocol

from flask import Request, g, request

from gentlepol.application.use_cases.users.authenticate_user import AuthenticateUserUseCase
from gentlepol.domain.users.entities import User
from gentlepol.domain.users.exceptions import MissingTokenError
from gentlepol.shared.logging import bind_user, logger


class AuthenticatingController(Protocol):
    _authenticate: AuthenticateUserUseCase
    _session_cookie_name: str


def extract_token(req: Request, cookie_name: str) -> str:
    auth = req.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        token = auth[7:].strip()
        if token:
            return token
    return req.cookies.get(cookie_name, "")


def auth_required(f: Callable[..., Any]) -> Callable[..., Any]:
    """Resolve the session token and pass the owning ``User`` to the view."""

    @wraps(f)
    def inner(self: AuthenticatingController, *a: Any, **kw: Any) -> Any:
        token = extract_token(request, self._session_cookie_name)
        if not token:
            logger.warning(f"No session token on {request.method} {request.path}")
            raise MissingTokenError()

        user: User = self._authenticate.execute(token)
        g.user_id = user.id
        bind_user(user.id)
        logger.debug(f"Auth OK: {request.method} {request.path}")
        return f(self, user, *a, **kw)

    return inner
