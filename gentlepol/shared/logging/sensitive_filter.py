# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redaction applied to every log record before any sink sees it."""

from __future__ import annotations

import re
from typing import Any, NamedTuple

_MASK = "***REDACTED***"


class _Rule(NamedTuple):
    name: str
    pattern: re.Pattern[str]
    replacement: str


def _rule(name: str, pattern: str, replacement: str, flags: int = 0) -> _Rule:
    return _Rule(name, re.compile(pattern, flags), replacement)


# Order matters: the header rules run last so they catch whatever is left.
_RULES: tuple[_Rule, ...] = (
    _rule("bearer", r"(bearer\s+)([\w\-.]{20,})", rf"\1{_MASK}", re.IGNORECASE),
    _rule("token", r"(token\s*[:=]\s*['\"]?)([\w\-.]{20,})(['\"]?)", rf"\1{_MASK}\3"),
    _rule(
        "password",
        r"(password\s*[:=]\s*['\"]?)([^'\"\s,]+)(['\"]?)",
        rf"\1{_MASK}\3",
        re.IGNORECASE,
    ),
    _rule(
        "password_hash",
        r"(password_hash\s*[:=]\s*['\"]?)([^'\"\s,]+)(['\"]?)",
        rf"\1{_MASK}\3",
        re.IGNORECASE,
    ),
    # werkzeug "method$salt$hex" strings that show up without a key
    _rule("hash", r"\b(?:scrypt|pbkdf2):[^\s'\"]+\$[^\s'\"]+\$[0-9a-f]+", "***REDACTED_HASH***"),
    _rule(
        "session_id",
        r"(session[_-]?id\s*[:=]\s*['\"]?)([\w\-.]{20,})(['\"]?)",
        rf"\1{_MASK}\3",
        re.IGNORECASE,
    ),
    _rule(
        "uuid",
        r"\b[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\b",
        "***REDACTED_TOKEN***",
    ),
    _rule(
        "database_url",
        r"(postgresql|postgres|mysql)(\+\w+)?://([^:/@]+):([^@]+)@",
        rf"\1\2://\3:{_MASK}@",
    ),
    _rule(
        "authorization_header",
        r"(authorization\s*:\s*['\"]?)([^'\"]{10,})(['\"]?)",
        rf"\1{_MASK}\3",
        re.IGNORECASE,
    ),
    _rule("cookie_header", r"(cookie\s*:\s*)([^\r\n]+)", rf"\1{_MASK}", re.IGNORECASE),
)


def sanitize_message(message: str) -> str:
    for rule in _RULES:
        message = rule.pattern.sub(rule.replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru sink filter: redact the message in place and let the record through."""
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True
