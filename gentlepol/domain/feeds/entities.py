# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Feed definitions and the selector bundle stored with them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Selectors:
    """CSS selectors describing where posts live on the source page.

    Only ``link`` is mandatory; the rest are optional extraction hints. The
    strings are stored and returned verbatim, never interpreted here.
    """

    link: str
    post: str | None = None
    title: str | None = None
    description: str | None = None
    date: str | None = None
    image: str | None = None


@dataclass(slots=True, frozen=True)
class FeedDefinition:
    """What a client submits and gets back: no owner, no storage id."""

    name: str
    url: str
    selectors: Selectors


@dataclass(slots=True, frozen=True)
class Feed:

    name: str
    url: str
    owner_id: int
    selectors: Selectors

    @classmethod
    def from_definition(cls, definition: FeedDefinition, owner_id: int) -> Feed:
        return cls(
            name=definition.name,
            url=definition.url,
            owner_id=owner_id,
            selectors=definition.selectors,
        )

    def definition(self) -> FeedDefinition:
        return FeedDefinition(name=self.name, url=self.url, selectors=self.selectors)

    def is_owned_by(self, user_id: int) -> bool:
        return self.owner_id == user_id
