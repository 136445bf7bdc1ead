from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from gentlepol.domain.feeds.entities import Feed, FeedDefinition, Selectors
from gentlepol.domain.feeds.exceptions import DuplicateFeedError
from gentlepol.domain.users.entities import SessionToken
from gentlepol.domain.users.exceptions import UserAlreadyExistsError
from gentlepol.infrastructure.db.models import WebNews
from gentlepol.infrastructure.repositories.feeds.sqlalchemy_feed_repository import (
    SqlAlchemyFeedRepository,
)
from gentlepol.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionTokenRepository,
    SqlAlchemyUserRepository,
)
from gentlepol.poller import poll_once
from gentlepol.shared.errors import StorageError


@pytest.fixture()
def users(session_factory: Callable[[], Session]) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(session_factory)


@pytest.fixture()
def feeds(session_factory: Callable[[], Session]) -> SqlAlchemyFeedRepository:
    return SqlAlchemyFeedRepository(session_factory, batch_size=2)


def _feed(name: str, owner_id: int, **selectors: str) -> Feed:
    return Feed(
        name=name,
        url=f"https://example.com/{name}",
        owner_id=owner_id,
        selectors=Selectors(link=selectors.pop("link", "a"), **selectors),
    )


def test_user_add_and_lookup(users: SqlAlchemyUserRepository) -> None:
    alice = users.add("alice", "hash-a")

    creds = users.find_credentials("alice")
    assert creds is not None
    assert creds.user_id == alice.id
    assert creds.password_hash == "hash-a"
    assert users.find_by_id(alice.id) == alice
    assert users.find_credentials("bob") is None
    assert users.find_by_id(alice.id + 100) is None


def test_user_duplicate_name(users: SqlAlchemyUserRepository) -> None:
    users.add("alice", "hash-a")

    with pytest.raises(UserAlreadyExistsError):
        users.add("alice", "hash-b")
    assert users.find_credentials("alice").password_hash == "hash-a"


def test_session_roundtrip_is_timezone_aware(
    users: SqlAlchemyUserRepository, session_factory: Callable[[], Session]
) -> None:
    tokens = SqlAlchemySessionTokenRepository(session_factory)
    alice = users.add("alice", "hash-a")
    valid_until = datetime(2030, 5, 1, 8, 30, tzinfo=UTC)
    token = uuid4()

    tokens.add(SessionToken(user_id=alice.id, token=token, valid_until=valid_until))

    stored = tokens.find(token)
    assert stored == SessionToken(user_id=alice.id, token=token, valid_until=valid_until)
    assert stored.valid_until.tzinfo is not None
    assert tokens.find(uuid4()) is None


def test_session_for_missing_user_is_storage_error(
    session_factory: Callable[[], Session],
) -> None:
    tokens = SqlAlchemySessionTokenRepository(session_factory)

    valid_until = datetime.now(UTC) + timedelta(days=1)
    with pytest.raises(StorageError):
        tokens.add(SessionToken(user_id=42, token=uuid4(), valid_until=valid_until))


def test_feed_add_find_and_list(
    users: SqlAlchemyUserRepository, feeds: SqlAlchemyFeedRepository
) -> None:
    alice = users.add("alice", "h")
    bob = users.add("bob", "h")
    blog = _feed("blog", alice.id, post="article", date="time")
    feeds.add(blog)
    feeds.add(_feed("news", alice.id))
    feeds.add(_feed("bobs", bob.id))

    assert feeds.find_by_name("blog") == blog
    assert feeds.find_by_name("missing") is None
    assert feeds.list_names_for_owner(alice.id) == ["blog", "news"]
    assert feeds.list_names_for_owner(bob.id) == ["bobs"]


def test_feed_names_are_globally_unique(
    users: SqlAlchemyUserRepository, feeds: SqlAlchemyFeedRepository
) -> None:
    alice = users.add("alice", "h")
    bob = users.add("bob", "h")
    feeds.add(_feed("blog", alice.id))

    with pytest.raises(DuplicateFeedError):
        feeds.add(_feed("blog", bob.id))


def test_update_owned_is_conditional_on_owner(
    users: SqlAlchemyUserRepository,
    feeds: SqlAlchemyFeedRepository,
    session_factory: Callable[[], Session],
) -> None:
    alice = users.add("alice", "h")
    bob = users.add("bob", "h")
    feeds.add(_feed("blog", alice.id, title="h1"))
    new_def = FeedDefinition(name="ignored", url="https://new", selectors=Selectors(link="h2 a"))

    assert feeds.update_owned(bob.id, "blog", new_def) is False
    assert feeds.find_by_name("blog").url == "https://example.com/blog"

    assert feeds.update_owned(alice.id, "blog", new_def) is True
    assert feeds.find_by_name("blog") == Feed(
        name="blog", url="https://new", owner_id=alice.id, selectors=Selectors(link="h2 a")
    )
    with session_factory() as session:
        assert session.scalars(select(WebNews.name)).all() == ["blog"]

    assert feeds.update_owned(alice.id, "missing", new_def) is False


def test_delete_owned_is_conditional_on_owner(
    users: SqlAlchemyUserRepository, feeds: SqlAlchemyFeedRepository
) -> None:
    alice = users.add("alice", "h")
    bob = users.add("bob", "h")
    feeds.add(_feed("blog", alice.id))

    assert feeds.delete_owned(bob.id, "blog") is False
    assert feeds.find_by_name("blog") is not None
    assert feeds.delete_owned(alice.id, "blog") is True
    assert feeds.find_by_name("blog") is None
    assert feeds.delete_owned(alice.id, "blog") is False


def test_iter_all_streams_every_row(
    users: SqlAlchemyUserRepository, feeds: SqlAlchemyFeedRepository
) -> None:
    alice = users.add("alice", "h")
    bob = users.add("bob", "h")
    for name in ("a", "b", "c"):
        feeds.add(_feed(name, alice.id))
    feeds.add(_feed("d", bob.id))

    assert [f.name for f in feeds.iter_all()] == ["a", "b", "c", "d"]
    assert poll_once(feeds) == 4


def test_driver_failure_becomes_storage_error() -> None:
    def broken_factory() -> Session:
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    with pytest.raises(StorageError) as exc_info:
        SqlAlchemyFeedRepository(broken_factory).list_names_for_owner(1)
    assert exc_info.value.to_dict() == {"error": "storage_failure"}
