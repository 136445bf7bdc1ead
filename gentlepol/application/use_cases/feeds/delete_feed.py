# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from gentlepol.domain.feeds.exceptions import FeedNotFoundError
from gentlepol.domain.feeds.repositories import FeedRepository
from gentlepol.shared.logging import logger


class DeleteFeedUseCase:
    def __init__(self, *, feeds: FeedRepository) -> None:
        self._feeds = feeds

    def execute(self, user_id: int, name: str) -> None:
        if not self._feeds.delete_owned(user_id, name):
            logger.info(f"feeds.delete: not_found (user_id={user_id}, name={name!r})")
            raise FeedNotFoundError()
        logger.info(f"feeds.delete: ok (user_id={user_id}, name={name!r})")
