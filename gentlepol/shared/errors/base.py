# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application error hierarchy.

Every error carries a public ``code`` and an HTTP ``status``. Subclasses
usually pin both as class attributes. ``detail`` is diagnostic text for the
log only; it is never serialised into a response body.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None
    detail: str | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    @property
    def is_server_error(self) -> bool:
        return self.status >= HTTPStatus.INTERNAL_SERVER_ERROR

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class _PinnedError(AppError):
    """Base for errors whose code and status come from the class."""

    default_code: ClassVar[str] = "error"
    default_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST

    def __init__(
        self,
        *,
        context: Mapping[str, Any] | None = None,
        detail: str | None = None,
    ) -> None:
        # Unset slots raise AttributeError on the instance, so the defaults apply.
        super().__init__(
            code=getattr(self, "code", self.default_code),
            status=getattr(self, "status", self.default_status),
            context=context,
            detail=detail,
        )


class DomainError(_PinnedError):
    default_code = "domain_error"


class InfrastructureError(_PinnedError):
    default_code = "infrastructure_error"
    default_status = HTTPStatus.INTERNAL_SERVER_ERROR


class ValidationError(_PinnedError):
    code = "validation_error"
    status = HTTPStatus.UNPROCESSABLE_ENTITY


class StorageError(InfrastructureError):
    """Persistence failure other than a uniqueness violation."""

    code = "storage_failure"

    def __init__(self, operation: str | None = None) -> None:
        super().__init__(detail=operation)

    @property
    def operation(self) -> str | None:
        return self.detail
