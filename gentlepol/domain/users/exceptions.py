# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from gentlepol.shared.errors.base import DomainError, InfrastructureError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED


class NoSuchUserError(InvalidCredentialsError):
    pass


class WrongPasswordError(InvalidCredentialsError):
    pass


class UnauthenticatedError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED


class MissingTokenError(UnauthenticatedError):
    pass


class MalformedTokenError(UnauthenticatedError):
    pass


class UnknownTokenError(UnauthenticatedError):
    pass


class ExpiredTokenError(UnauthenticatedError):
    pass


class PasswordHashingError(InfrastructureError):
    code = "password_hashing_failed"


class SessionOwnerMissingError(InfrastructureError):
    """A live session points at a user row that no longer exists."""

    code = "internal_error"

    def __init__(self, user_id: int) -> None:
        super().__init__(detail=f"session owner {user_id} missing")
        self.user_id = user_id
