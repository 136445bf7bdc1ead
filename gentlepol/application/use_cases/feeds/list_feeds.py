# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from gentlepol.domain.feeds.repositories import FeedRepository


class ListFeedNamesUseCase:
    def __init__(self, *, feeds: FeedRepository) -> None:
        self._feeds = feeds

    def execute(self, user_id: int) -> list[str]:
        return list(self._feeds.list_names_for_owner(user_id))
