# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Resolve a presented session token to the user that owns it."""

from __future__ import annotations

from uuid import UUID

from gentlepol.domain.users.entities import User
from gentlepol.domain.users.exceptions import (
    ExpiredTokenError,
    MalformedTokenError,
    SessionOwnerMissingError,
    UnknownTokenError,
)
from gentlepol.domain.users.repositories import SessionTokenRepository, UserRepository
from gentlepol.shared.logging import logger
from gentlepol.shared.utils import Clock, utcnow


class AuthenticateUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenRepository,
        clock: Clock = utcnow,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._clock = clock

    def execute(self, token: str) -> User:
        try:
            parsed = UUID(token)
        except (TypeError, ValueError, AttributeError) as exc:
            logger.debug("auth.token: malformed")
            raise MalformedTokenError() from exc

        session = self._tokens.find(parsed)
        if session is None:
            logger.debug(f"auth.token: unknown (tok={parsed.hex[:8]}…)")
            raise UnknownTokenError()

        # Expired rows are left in place for external cleanup.
        if session.is_expired(self._clock()):
            logger.debug(f"auth.token: expired (user_id={session.user_id})")
            raise ExpiredTokenError()

        user = self._users.find_by_id(session.user_id)
        if user is None:
            logger.error(f"auth.token: session owner missing (user_id={session.user_id})")
            raise SessionOwnerMissingError(session.user_id)
        return user
