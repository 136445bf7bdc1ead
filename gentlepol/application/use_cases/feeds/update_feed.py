# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from gentlepol.domain.feeds.entities import FeedDefinition
from gentlepol.domain.feeds.exceptions import FeedNotFoundError
from gentlepol.domain.feeds.repositories import FeedRepository
from gentlepol.shared.logging import logger


class UpdateFeedUseCase:
    """Overwrite url and selectors of an owned feed.

    The ownership check and the write are a single conditional update, so a
    concurrent delete or a foreign owner both end in ``FeedNotFoundError``.
    ``definition.name`` is ignored; feeds are never renamed.
    """

    def __init__(self, *, feeds: FeedRepository) -> None:
        self._feeds = feeds

    def execute(self, user_id: int, name: str, definition: FeedDefinition) -> None:
        if not self._feeds.update_owned(user_id, name, definition):
            logger.info(f"feeds.update: not_found (user_id={user_id}, name={name!r})")
            raise FeedNotFoundError()
        logger.info(f"feeds.update: ok (user_id={user_id}, name={name!r})")
