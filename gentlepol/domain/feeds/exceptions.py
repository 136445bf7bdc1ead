# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from gentlepol.shared.errors.base import DomainError


class FeedNotFoundError(DomainError):
    """Raised both for absent feeds and for feeds owned by someone else."""

    code = "feed_not_found"
    status = HTTPStatus.NOT_FOUND


class DuplicateFeedError(DomainError):
    code = "duplicate_feed"
    status = HTTPStatus.CONFLICT
