# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from gentlepol.infrastructure.db.session import Base


class User(Base):
    __tablename__ = "feed_user"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(256))


class UserSession(Base):
    __tablename__ = "user_session"
    token: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    owner: Mapped[int] = mapped_column(
        ForeignKey("feed_user.id", ondelete="CASCADE"), index=True
    )
    valid_until: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)


class WebNews(Base):
    __tablename__ = "web_news"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Unique across all owners.
    name: Mapped[str] = mapped_column(String(256), unique=True, index=True)
    url: Mapped[str] = mapped_column(Text)
    owner: Mapped[int] = mapped_column(
        ForeignKey("feed_user.id", ondelete="CASCADE"), index=True
    )
    selector_post: Mapped[str | None] = mapped_column(Text, nullable=True)
    selector_title: Mapped[str | None] = mapped_column(Text, nullable=True)
    selector_link: Mapped[str] = mapped_column(Text)
    selector_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    selector_date: Mapped[str | None] = mapped_column(Text, nullable=True)
    selector_image: Mapped[str | None] = mapped_column(Text, nullable=True)
