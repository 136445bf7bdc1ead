# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.feeds.create_feed import CreateFeedUseCase
from .use_cases.feeds.delete_feed import DeleteFeedUseCase
from .use_cases.feeds.get_feed import GetFeedUseCase
from .use_cases.feeds.list_feeds import ListFeedNamesUseCase
from .use_cases.feeds.update_feed import UpdateFeedUseCase
from .use_cases.users.authenticate_user import AuthenticateUserUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "AuthenticateUserUseCase",
    "CreateFeedUseCase",
    "DeleteFeedUseCase",
    "GetFeedUseCase",
    "ListFeedNamesUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "UpdateFeedUseCase",
]
