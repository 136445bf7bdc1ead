# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from gentlepol.domain.feeds.entities import Feed, FeedDefinition
from gentlepol.domain.feeds.exceptions import DuplicateFeedError
from gentlepol.domain.feeds.repositories import FeedRepository
from gentlepol.shared.logging import logger


class CreateFeedUseCase:
    def __init__(self, *, feeds: FeedRepository) -> None:
        self._feeds = feeds

    def execute(self, user_id: int, definition: FeedDefinition) -> None:
        # Feed names are unique across all owners, not per owner.
        try:
            self._feeds.add(Feed.from_definition(definition, owner_id=user_id))
        except DuplicateFeedError:
            logger.info(f"feeds.create: duplicate name (user_id={user_id})")
            raise
        logger.info(f"feeds.create: ok (user_id={user_id}, name={definition.name!r})")
