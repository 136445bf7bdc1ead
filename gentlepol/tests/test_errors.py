from __future__ import annotations

from http import HTTPStatus

import pytest

from gentlepol.domain.feeds.exceptions import DuplicateFeedError, FeedNotFoundError
from gentlepol.domain.users.exceptions import (
    ExpiredTokenError,
    NoSuchUserError,
    PasswordHashingError,
    SessionOwnerMissingError,
    UserAlreadyExistsError,
    WrongPasswordError,
)
from gentlepol.shared.errors import AppError, StorageError, ValidationError


@pytest.mark.parametrize(
    ("error", "code", "status"),
    [
        (NoSuchUserError(), "invalid_credentials", HTTPStatus.UNAUTHORIZED),
        (WrongPasswordError(), "invalid_credentials", HTTPStatus.UNAUTHORIZED),
        (ExpiredTokenError(), "unauthorized", HTTPStatus.UNAUTHORIZED),
        (FeedNotFoundError(), "feed_not_found", HTTPStatus.NOT_FOUND),
        (UserAlreadyExistsError(), "user_already_exists", HTTPStatus.CONFLICT),
        (DuplicateFeedError(), "duplicate_feed", HTTPStatus.CONFLICT),
        (PasswordHashingError(), "password_hashing_failed", HTTPStatus.INTERNAL_SERVER_ERROR),
        (SessionOwnerMissingError(7), "internal_error", HTTPStatus.INTERNAL_SERVER_ERROR),
        (StorageError("feeds.add"), "storage_failure", HTTPStatus.INTERNAL_SERVER_ERROR),
        (ValidationError(), "validation_error", HTTPStatus.UNPROCESSABLE_ENTITY),
    ],
)
def test_error_codes_and_statuses(error: AppError, code: str, status: HTTPStatus) -> None:
    assert error.code == code
    assert error.status == status
    assert error.to_dict() == {"error": code}


def test_detail_stays_out_of_the_response_body() -> None:
    error = SessionOwnerMissingError(7)

    assert error.is_server_error
    assert error.user_id == 7
    assert "7" in (error.detail or "")
    assert error.to_dict() == {"error": "internal_error"}


def test_storage_error_keeps_operation() -> None:
    error = StorageError("sessions.find")

    assert error.operation == "sessions.find"
    assert str(error) == "storage_failure"


def test_context_is_serialised() -> None:
    error = ValidationError(context={"fields": ["url"]})

    assert not error.is_server_error
    assert error.to_dict() == {"error": "validation_error", "context": {"fields": ["url"]}}
