# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from .entities import Feed, FeedDefinition


class FeedRepository(Protocol):
    def add(self, feed: Feed) -> None: ...
    def list_names_for_owner(self, owner_id: int) -> list[str]: ...
    def find_by_name(self, name: str) -> Feed | None: ...

    def update_owned(self, owner_id: int, name: str, definition: FeedDefinition) -> bool:
        """Overwrite url and selectors of ``name`` if ``owner_id`` owns it.

        Returns whether a row was changed. Name and owner are left alone.
        """
        ...

    def delete_owned(self, owner_id: int, name: str) -> bool: ...
    def iter_all(self) -> Iterator[Feed]: ...
