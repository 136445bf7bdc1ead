# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from gentlepol.domain.users.entities import User
from gentlepol.domain.users.exceptions import UserAlreadyExistsError
from gentlepol.domain.users.repositories import PasswordHasher, UserRepository
from gentlepol.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> User:
        hashed = self._password_hasher.hash(password)
        try:
            # Uniqueness is enforced by storage, not by a prior lookup.
            user = self._users.add(username, hashed)
        except UserAlreadyExistsError:
            logger.info("auth.register: duplicate username")
            raise
        logger.info(f"auth.register: ok (user_id={user.id})")
        return user
