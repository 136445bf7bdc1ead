# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from .entities import Credentials, SessionToken, User


class UserRepository(Protocol):
    def add(self, username: str, password_hash: str) -> User: ...
    def find_credentials(self, username: str) -> Credentials | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...


class SessionTokenRepository(Protocol):
    def add(self, session: SessionToken) -> None: ...
    def find(self, token: UUID) -> SessionToken | None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
