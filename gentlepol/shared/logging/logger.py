"""Loguru setup shared by the API server and the poller.

Two context values travel with every record: the correlation id of the
current request (or poller run) and the id of the authenticated user, once
known. Both live in ``ContextVar`` so they stay correct across threads.
"""

from __future__ import annotations

import logging
import os
import secrets
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> "
    "<blue>u={extra[user_id]}</blue> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default="-")
_USER_ID: ContextVar[str] = ContextVar("user_id", default="-")

_DEFAULT_LOG_FILE = Path(__file__).resolve().parents[3] / "instance" / "gentlepol.log"


def _context() -> dict[str, str]:
    return {"correlation_id": _CORRELATION_ID.get(), "user_id": _USER_ID.get()}


class _InterceptHandler(logging.Handler):
    """Forward stdlib ``logging`` records (werkzeug, sqlalchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk past the logging module so loguru reports the real caller.
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        _logger.bind(**_context()).opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


class ContextualLogger:
    """Proxy for loguru that binds the current correlation and user ids."""

    def __getattr__(self, name):  # pragma: no cover
        return getattr(_logger.bind(**_context()), name)


def new_correlation_id() -> str:
    return secrets.token_urlsafe(8)


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or "-")


def get_correlation_id() -> str:
    return _CORRELATION_ID.get()


def clear_correlation_id() -> None:
    _CORRELATION_ID.set("-")
    _USER_ID.set("-")


def bind_user(user_id: int | None) -> None:
    _USER_ID.set("-" if user_id is None else str(user_id))


@contextmanager
def correlation_scope(value: str | None = None) -> Iterator[str]:
    """Run a block under one correlation id, restoring the previous ids afterwards."""
    cid_token = _CORRELATION_ID.set(value or new_correlation_id())
    uid_token = _USER_ID.set("-")
    try:
        yield _CORRELATION_ID.get()
    finally:
        _USER_ID.reset(uid_token)
        _CORRELATION_ID.reset(cid_token)


def setup_logging(
    level: str | None = None,
    *,
    debug_mode: bool = False,
    log_file: str | os.PathLike[str] | None = None,
) -> None:
    level = (level or os.getenv("LOG_LEVEL") or ("DEBUG" if debug_mode else "INFO")).upper()
    path = Path(log_file or os.getenv("LOG_FILE") or _DEFAULT_LOG_FILE)
    path.parent.mkdir(parents=True, exist_ok=True)

    _logger.remove()
    _logger.configure(extra={"correlation_id": "-", "user_id": "-"})
    _logger.add(
        sys.stderr,
        level=level,
        format=_FMT,
        colorize=True,
        backtrace=False,
        diagnose=False,
        filter=sanitize_record,
    )
    _logger.add(
        path,
        level=level,
        format=_FMT,
        colorize=False,
        backtrace=False,
        diagnose=False,
        enqueue=True,
        encoding="utf-8",
        rotation="10 MB",
        retention=5,
        filter=sanitize_record,
    )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    logging.getLogger("werkzeug").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


logger = ContextualLogger()

__all__ = [
    "bind_user",
    "clear_correlation_id",
    "correlation_scope",
    "get_correlation_id",
    "logger",
    "new_correlation_id",
    "set_correlation_id",
    "setup_logging",
]
