# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""One session per repository call."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from types import TracebackType

from sqlalchemy.orm import Session

from gentlepol.shared.logging import logger

SessionFactory = Callable[[], Session]


class SqlAlchemyUnitOfWork:
    """Commit a writing block on clean exit, roll back otherwise, always close.

    Read-only blocks are rolled back even on success so a stray flush can
    never persist anything.
    """

    __slots__ = ("_factory", "_session", "operation", "read_only")

    def __init__(
        self, factory: SessionFactory, operation: str = "db", *, read_only: bool = False
    ) -> None:
        self._factory = factory
        self._session: Session | None = None
        self.operation = operation
        self.read_only = read_only

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self._factory()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session = self.session
        try:
            if exc is not None:
                logger.debug(f"uow.{self.operation}: rollback ({exc_type.__name__})")
                session.rollback()
            elif self.read_only:
                session.rollback()
            else:
                session.commit()
                logger.debug(f"uow.{self.operation}: committed")
        except Exception:
            logger.warning(f"uow.{self.operation}: finalising failed, rolling back")
            session.rollback()
            raise
        finally:
            session.close()
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("UnitOfWork session accessed outside its context")
        return self._session


@contextmanager
def unit_of_work_scope(
    factory: SessionFactory, operation: str = "db", *, read_only: bool = False
) -> Iterator[Session]:
    with SqlAlchemyUnitOfWork(factory, operation, read_only=read_only) as uow:
        yield uow.session
