# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from gentlepol.shared.errors import AppError, StorageError
from gentlepol.shared.logging import logger

_UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate:
        return sqlstate == _UNIQUE_VIOLATION_SQLSTATE
    return "unique" in str(orig).lower()


@contextmanager
def storage_errors(
    operation: str, *, on_duplicate: Callable[[], AppError] | None = None
) -> Iterator[None]:
    """Translate SQLAlchemy failures into application errors."""
    try:
        yield
    except IntegrityError as exc:
        if on_duplicate is not None and is_unique_violation(exc):
            raise on_duplicate() from exc
        logger.error(f"db.{operation}: integrity error ({type(exc.orig).__name__})")
        raise StorageError(operation) from exc
    except SQLAlchemyError as exc:
        logger.error(f"db.{operation}: failed ({type(exc).__name__})")
        raise StorageError(operation) from exc
