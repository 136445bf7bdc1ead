# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from gentlepol.domain.feeds.entities import FeedDefinition
from gentlepol.domain.feeds.exceptions import FeedNotFoundError
from gentlepol.domain.feeds.repositories import FeedRepository
from gentlepol.shared.logging import logger


class GetFeedUseCase:
    def __init__(self, *, feeds: FeedRepository) -> None:
        self._feeds = feeds

    def execute(self, user_id: int, name: str) -> FeedDefinition:
        feed = self._feeds.find_by_name(name)
        if feed is None:
            logger.debug(f"feeds.get: absent (user_id={user_id}, name={name!r})")
            raise FeedNotFoundError()
        if not feed.is_owned_by(user_id):
            # Reported exactly like an absent feed.
            logger.info(f"feeds.get: foreign feed (user_id={user_id}, name={name!r})")
            raise FeedNotFoundError()
        return feed.definition()
