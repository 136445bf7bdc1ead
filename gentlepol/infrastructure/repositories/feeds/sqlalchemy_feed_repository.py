# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from gentlepol.domain.feeds.entities import Feed, FeedDefinition, Selectors
from gentlepol.domain.feeds.exceptions import DuplicateFeedError
from gentlepol.domain.feeds.repositories import FeedRepository
from gentlepol.infrastructure.db.models import WebNews
from gentlepol.infrastructure.repositories.errors import storage_errors
from gentlepol.infrastructure.unit_of_work import unit_of_work_scope


def _selector_columns(selectors: Selectors) -> dict[str, Any]:
    return {
        "selector_post": selectors.post,
        "selector_title": selectors.title,
        "selector_link": selectors.link,
        "selector_description": selectors.description,
        "selector_date": selectors.date,
        "selector_image": selectors.image,
    }


def _to_domain(row: WebNews) -> Feed:
    return Feed(
        name=row.name,
        url=row.url,
        owner_id=row.owner,
        selectors=Selectors(
            post=row.selector_post,
            title=row.selector_title,
            link=row.selector_link,
            description=row.selector_description,
            date=row.selector_date,
            image=row.selector_image,
        ),
    )


class SqlAlchemyFeedRepository(FeedRepository):
    def __init__(self, session_factory: Callable[[], Session], *, batch_size: int = 100):
        self._session_factory = session_factory
        self._batch_size = batch_size

    def add(self, feed: Feed) -> None:
        with storage_errors("feeds.add", on_duplicate=DuplicateFeedError):
            with unit_of_work_scope(self._session_factory, "feeds.add") as session:
                session.add(
                    WebNews(
                        name=feed.name,
                        url=feed.url,
                        owner=feed.owner_id,
                        **_selector_columns(feed.selectors),
                    )
                )

    def list_names_for_owner(self, owner_id: int) -> list[str]:
        with storage_errors("feeds.list_names"):
            with unit_of_work_scope(
                self._session_factory, "feeds.list_names", read_only=True
            ) as session:
                names = session.scalars(
                    select(WebNews.name)
                    .where(WebNews.owner == owner_id)
                    .order_by(WebNews.id.asc())
                )
                return list(names)

    def find_by_name(self, name: str) -> Feed | None:
        with storage_errors("feeds.find_by_name"):
            with unit_of_work_scope(
                self._session_factory, "feeds.find_by_name", read_only=True
            ) as session:
                row = session.scalars(select(WebNews).where(WebNews.name == name)).first()
                return _to_domain(row) if row else None

    def update_owned(self, owner_id: int, name: str, definition: FeedDefinition) -> bool:
        with storage_errors("feeds.update"):
            with unit_of_work_scope(self._session_factory, "feeds.update") as session:
                result = session.execute(
                    update(WebNews)
                    .where(WebNews.name == name, WebNews.owner == owner_id)
                    .values(url=definition.url, **_selector_columns(definition.selectors))
                    .execution_options(synchronize_session=False)
                )
                return result.rowcount > 0

    def delete_owned(self, owner_id: int, name: str) -> bool:
        with storage_errors("feeds.delete"):
            with unit_of_work_scope(self._session_factory, "feeds.delete") as session:
                result = session.execute(
                    delete(WebNews)
                    .where(WebNews.name == name, WebNews.owner == owner_id)
                    .execution_options(synchronize_session=False)
                )
                return result.rowcount > 0

    def iter_all(self) -> Iterator[Feed]:
        with storage_errors("feeds.iter_all"):
            with unit_of_work_scope(
                self._session_factory, "feeds.iter_all", read_only=True
            ) as session:
                rows = session.scalars(
                    select(WebNews)
                    .order_by(WebNews.id.asc())
                    .execution_options(yield_per=self._batch_size)
                )
                for row in rows:
                    yield _to_domain(row)
