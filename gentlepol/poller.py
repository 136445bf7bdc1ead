# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Enumerate every stored feed definition.

Fetching and parsing the sources is not done here; the poller only walks the
``web_news`` table so a downstream scraper can pick the rows up.
"""

from __future__ import annotations

from gentlepol.domain.feeds.repositories import FeedRepository
from gentlepol.infrastructure.container import Container
from gentlepol.infrastructure.db import init_db
from gentlepol.shared.logging import correlation_scope, logger, setup_logging


def poll_once(feeds: FeedRepository) -> int:
    count = 0
    with correlation_scope() as run_id:
        logger.info(f"poller: run started (run={run_id})")
        for feed in feeds.iter_all():
            count += 1
            logger.info(
                f"poller.feed: name={feed.name!r} url={feed.url!r} owner={feed.owner_id} "
                f"link_selector={feed.selectors.link!r}"
            )
        logger.info(f"poller: done (feeds={count})")
    return count


def main() -> int:
    container = Container()
    setup_logging(debug_mode=container.config.debug_logging)
    init_db(container.engine)
    poll_once(container.feed_repository)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
