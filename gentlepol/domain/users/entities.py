# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str


@dataclass(slots=True, frozen=True)
class Credentials:
    """Stored login material; never leaves the authentication use cases."""

    user_id: int
    username: str
    password_hash: str

    def __repr__(self) -> str:
        return f"Credentials(user_id={self.user_id}, username={self.username!r})"


@dataclass(slots=True, frozen=True)
class SessionToken:

    user_id: int
    token: UUID
    valid_until: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.valid_until
