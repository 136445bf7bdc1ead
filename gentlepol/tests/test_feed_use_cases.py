from __future__ import annotations

from collections.abc import Iterator

import pytest

from gentlepol.application.use_cases.feeds.create_feed import CreateFeedUseCase
from gentlepol.application.use_cases.feeds.delete_feed import DeleteFeedUseCase
from gentlepol.application.use_cases.feeds.get_feed import GetFeedUseCase
from gentlepol.application.use_cases.feeds.list_feeds import ListFeedNamesUseCase
from gentlepol.application.use_cases.feeds.update_feed import UpdateFeedUseCase
from gentlepol.domain.feeds.entities import Feed, FeedDefinition, Selectors
from gentlepol.domain.feeds.exceptions import DuplicateFeedError, FeedNotFoundError
from gentlepol.domain.feeds.repositories import FeedRepository

ALICE = 1
BOB = 2


class InMemoryFeedRepository(FeedRepository):
    def __init__(self) -> None:
        self._rows: dict[str, Feed] = {}

    def add(self, feed: Feed) -> None:
        if feed.name in self._rows:
            raise DuplicateFeedError()
        self._rows[feed.name] = feed

    def list_names_for_owner(self, owner_id: int) -> list[str]:
        return [f.name for f in self._rows.values() if f.owner_id == owner_id]

    def find_by_name(self, name: str) -> Feed | None:
        return self._rows.get(name)

    def update_owned(self, owner_id: int, name: str, definition: FeedDefinition) -> bool:
        feed = self._rows.get(name)
        if feed is None or feed.owner_id != owner_id:
            return False
        self._rows[name] = Feed(
            name=feed.name,
            url=definition.url,
            owner_id=feed.owner_id,
            selectors=definition.selectors,
        )
        return True

    def delete_owned(self, owner_id: int, name: str) -> bool:
        feed = self._rows.get(name)
        if feed is None or feed.owner_id != owner_id:
            return False
        del self._rows[name]
        return True

    def iter_all(self) -> Iterator[Feed]:
        yield from self._rows.values()


def _blog(**overrides) -> FeedDefinition:
    values = {
        "name": "blog",
        "url": "https://x",
        "selectors": Selectors(link="a.post"),
    }
    values.update(overrides)
    return FeedDefinition(**values)


@pytest.fixture()
def feeds() -> InMemoryFeedRepository:
    return InMemoryFeedRepository()


@pytest.fixture()
def create(feeds: InMemoryFeedRepository) -> CreateFeedUseCase:
    return CreateFeedUseCase(feeds=feeds)


@pytest.fixture()
def get(feeds: InMemoryFeedRepository) -> GetFeedUseCase:
    return GetFeedUseCase(feeds=feeds)


def test_create_then_get_returns_definition(create: CreateFeedUseCase, get: GetFeedUseCase) -> None:
    create.execute(ALICE, _blog())

    assert get.execute(ALICE, "blog") == _blog()


def test_create_sets_owner(create: CreateFeedUseCase, feeds: InMemoryFeedRepository) -> None:
    create.execute(ALICE, _blog())

    stored = feeds.find_by_name("blog")
    assert stored is not None
    assert stored.owner_id == ALICE


def test_create_duplicate_name_across_owners(create: CreateFeedUseCase) -> None:
    create.execute(ALICE, _blog())

    with pytest.raises(DuplicateFeedError):
        create.execute(BOB, _blog(url="https://y"))


def test_foreign_feed_is_indistinguishable_from_missing(
    create: CreateFeedUseCase, get: GetFeedUseCase
) -> None:
    create.execute(ALICE, _blog())

    with pytest.raises(FeedNotFoundError) as foreign:
        get.execute(BOB, "blog")
    with pytest.raises(FeedNotFoundError) as missing:
        get.execute(BOB, "nonexistent")

    assert type(foreign.value) is type(missing.value)
    assert foreign.value.to_dict() == missing.value.to_dict() == {"error": "feed_not_found"}


def test_list_is_scoped_to_owner(create: CreateFeedUseCase, feeds: InMemoryFeedRepository) -> None:
    create.execute(ALICE, _blog())
    create.execute(ALICE, _blog(name="news"))
    create.execute(BOB, _blog(name="bobs"))
    list_names = ListFeedNamesUseCase(feeds=feeds)

    assert list_names.execute(ALICE) == ["blog", "news"]
    assert list_names.execute(BOB) == ["bobs"]
    assert list_names.execute(3) == []


def test_update_changes_url_and_selectors_only(
    create: CreateFeedUseCase, feeds: InMemoryFeedRepository
) -> None:
    create.execute(ALICE, _blog())
    update = UpdateFeedUseCase(feeds=feeds)
    new_selectors = Selectors(link="h2 a", post="article", title="h2", image="img")

    update.execute(ALICE, "blog", _blog(name="renamed", url="https://z", selectors=new_selectors))

    stored = feeds.find_by_name("blog")
    assert stored == Feed(name="blog", url="https://z", owner_id=ALICE, selectors=new_selectors)
    assert feeds.find_by_name("renamed") is None


def test_update_by_non_owner_leaves_row_untouched(
    create: CreateFeedUseCase, feeds: InMemoryFeedRepository
) -> None:
    create.execute(ALICE, _blog())
    before = feeds.find_by_name("blog")
    update = UpdateFeedUseCase(feeds=feeds)

    with pytest.raises(FeedNotFoundError):
        update.execute(BOB, "blog", _blog(url="https://evil"))

    assert feeds.find_by_name("blog") == before


def test_update_missing_feed(feeds: InMemoryFeedRepository) -> None:
    with pytest.raises(FeedNotFoundError):
        UpdateFeedUseCase(feeds=feeds).execute(ALICE, "nope", _blog())


def test_delete_removes_feed_for_everyone(
    create: CreateFeedUseCase, get: GetFeedUseCase, feeds: InMemoryFeedRepository
) -> None:
    create.execute(ALICE, _blog())
    DeleteFeedUseCase(feeds=feeds).execute(ALICE, "blog")

    for user_id in (ALICE, BOB):
        with pytest.raises(FeedNotFoundError):
            get.execute(user_id, "blog")


def test_delete_by_non_owner_is_not_found_and_keeps_row(
    create: CreateFeedUseCase, feeds: InMemoryFeedRepository
) -> None:
    create.execute(ALICE, _blog())
    delete = DeleteFeedUseCase(feeds=feeds)

    with pytest.raises(FeedNotFoundError):
        delete.execute(BOB, "blog")
    with pytest.raises(FeedNotFoundError):
        delete.execute(BOB, "nonexistent")

    assert feeds.find_by_name("blog") is not None
