# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from uuid import uuid4

from gentlepol.domain.users.entities import SessionToken
from gentlepol.domain.users.exceptions import NoSuchUserError, WrongPasswordError
from gentlepol.domain.users.repositories import (
    PasswordHasher,
    SessionTokenRepository,
    UserRepository,
)
from gentlepol.shared.logging import logger
from gentlepol.shared.utils import Clock, utcnow

DEFAULT_SESSION_TTL = timedelta(days=7)


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenRepository,
        password_hasher: PasswordHasher,
        session_ttl: timedelta = DEFAULT_SESSION_TTL,
        clock: Clock = utcnow,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._session_ttl = session_ttl
        self._clock = clock

    def execute(self, username: str, password: str) -> str:
        credentials = self._users.find_credentials(username)
        if credentials is None:
            logger.info("auth.login: rejected (reason=no_user)")
            raise NoSuchUserError()

        if not self._password_hasher.verify(password, credentials.password_hash):
            logger.info(f"auth.login: rejected (reason=password, user_id={credentials.user_id})")
            raise WrongPasswordError()

        token = uuid4()
        session = SessionToken(
            user_id=credentials.user_id,
            token=token,
            valid_until=self._clock() + self._session_ttl,
        )
        self._tokens.add(session)

        logger.info(
            f"auth.login: ok (user_id={credentials.user_id}, "
            f"exp={session.valid_until.isoformat()}, tok={token.hex[:8]}…)"
        )
        return str(token)
