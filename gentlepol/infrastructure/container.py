# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from gentlepol.application.services.password_hashing import WerkzeugPasswordHasher
from gentlepol.application.use_cases.feeds.create_feed import CreateFeedUseCase
from gentlepol.application.use_cases.feeds.delete_feed import DeleteFeedUseCase
from gentlepol.application.use_cases.feeds.get_feed import GetFeedUseCase
from gentlepol.application.use_cases.feeds.list_feeds import ListFeedNamesUseCase
from gentlepol.application.use_cases.feeds.update_feed import UpdateFeedUseCase
from gentlepol.application.use_cases.users.authenticate_user import AuthenticateUserUseCase
from gentlepol.application.use_cases.users.login_user import LoginUserUseCase
from gentlepol.application.use_cases.users.register_user import RegisterUserUseCase
from gentlepol.infrastructure.db import build_engine, build_session_factory
from gentlepol.infrastructure.repositories.feeds.sqlalchemy_feed_repository import (
    SqlAlchemyFeedRepository,
)
from gentlepol.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionTokenRepository,
    SqlAlchemyUserRepository,
)
from gentlepol.interfaces.http.controllers.auth_controller import AuthController
from gentlepol.interfaces.http.controllers.feeds_controller import FeedsController
from gentlepol.shared.config import AppConfig, load_config
from gentlepol.shared.utils import Clock, utcnow


class Container:
    def __init__(
        self,
        *,
        config: AppConfig | None = None,
        session_factory: Callable[[], Session] | None = None,
        clock: Clock = utcnow,
    ) -> None:
        self.config = config or load_config()
        self._session_factory = session_factory
        self.clock = clock

    @property
    def owns_engine(self) -> bool:
        """False when an externally built session factory was injected."""
        return self._session_factory is None

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> Callable[[], Session]:
        if self._session_factory is not None:
            return self._session_factory
        return build_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(
            method=self.config.auth.password_hash_method,
            max_bytes=self.config.auth.password_max_bytes,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def session_token_repository(self) -> SqlAlchemySessionTokenRepository:
        return SqlAlchemySessionTokenRepository(self.session_factory)

    @cached_property
    def feed_repository(self) -> SqlAlchemyFeedRepository:
        return SqlAlchemyFeedRepository(self.session_factory)

    # Authentication use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.session_token_repository,
            password_hasher=self.password_hasher,
            session_ttl=timedelta(days=self.config.auth.session_ttl_days),
            clock=self.clock,
        )

    @cached_property
    def authenticate_user_use_case(self) -> AuthenticateUserUseCase:
        return AuthenticateUserUseCase(
            users=self.user_repository,
            tokens=self.session_token_repository,
            clock=self.clock,
        )

    # Feed use cases

    @cached_property
    def create_feed_use_case(self) -> CreateFeedUseCase:
        return CreateFeedUseCase(feeds=self.feed_repository)

    @cached_property
    def list_feed_names_use_case(self) -> ListFeedNamesUseCase:
        return ListFeedNamesUseCase(feeds=self.feed_repository)

    @cached_property
    def get_feed_use_case(self) -> GetFeedUseCase:
        return GetFeedUseCase(feeds=self.feed_repository)

    @cached_property
    def update_feed_use_case(self) -> UpdateFeedUseCase:
        return UpdateFeedUseCase(feeds=self.feed_repository)

    @cached_property
    def delete_feed_use_case(self) -> DeleteFeedUseCase:
        return DeleteFeedUseCase(feeds=self.feed_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            security=self.config.security,
            session_ttl=timedelta(days=self.config.auth.session_ttl_days),
        )

    @cached_property
    def feeds_controller(self) -> FeedsController:
        return FeedsController(
            authenticate_use_case=self.authenticate_user_use_case,
            create_use_case=self.create_feed_use_case,
            list_use_case=self.list_feed_names_use_case,
            get_use_case=self.get_feed_use_case,
            update_use_case=self.update_feed_use_case,
            delete_use_case=self.delete_feed_use_case,
            session_cookie_name=self.config.security.session_cookie_name,
        )
