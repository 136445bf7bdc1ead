# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .feeds.entities import Feed, FeedDefinition, Selectors
from .users.entities import Credentials, SessionToken, User

__all__ = [
    "Credentials",
    "Feed",
    "FeedDefinition",
    "Selectors",
    "SessionToken",
    "User",
]
