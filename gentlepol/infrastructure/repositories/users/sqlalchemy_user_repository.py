# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from gentlepol.domain.users.entities import Credentials
from gentlepol.domain.users.entities import SessionToken as DomainSessionToken
from gentlepol.domain.users.entities import User as DomainUser
from gentlepol.domain.users.exceptions import UserAlreadyExistsError
from gentlepol.domain.users.repositories import SessionTokenRepository, UserRepository
from gentlepol.infrastructure.db.models import User, UserSession
from gentlepol.infrastructure.repositories.errors import storage_errors
from gentlepol.infrastructure.unit_of_work import unit_of_work_scope
from gentlepol.shared.utils import as_utc


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, username: str, password_hash: str) -> DomainUser:
        with storage_errors("users.add", on_duplicate=UserAlreadyExistsError):
            with unit_of_work_scope(self._session_factory, "users.add") as session:
                row = User(name=username, password_hash=password_hash)
                session.add(row)
                session.flush()
                return DomainUser(id=row.id, username=row.name)

    def find_credentials(self, username: str) -> Credentials | None:
        with storage_errors("users.find_credentials"):
            with unit_of_work_scope(
                self._session_factory, "users.find_credentials", read_only=True
            ) as session:
                row = session.scalars(select(User).where(User.name == username)).first()
                if not row:
                    return None
                return Credentials(
                    user_id=row.id,
                    username=row.name,
                    password_hash=row.password_hash,
                )

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with storage_errors("users.find_by_id"):
            with unit_of_work_scope(
                self._session_factory, "users.find_by_id", read_only=True
            ) as session:
                row = session.get(User, user_id)
                if not row:
                    return None
                return DomainUser(id=row.id, username=row.name)


class SqlAlchemySessionTokenRepository(SessionTokenRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, session: DomainSessionToken) -> None:
        with storage_errors("sessions.add"):
            with unit_of_work_scope(self._session_factory, "sessions.add") as db:
                db.add(
                    UserSession(
                        token=session.token,
                        owner=session.user_id,
                        valid_until=session.valid_until,
                    )
                )

    def find(self, token: UUID) -> DomainSessionToken | None:
        with storage_errors("sessions.find"):
            with unit_of_work_scope(self._session_factory, "sessions.find", read_only=True) as db:
                row = db.get(UserSession, token)
                if not row:
                    return None
                return DomainSessionToken(
                    user_id=row.owner,
                    token=row.token,
                    valid_until=as_utc(row.valid_until),
                )
