from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from gentlepol.infrastructure.db import Base, build_engine, build_session_factory, init_db
from gentlepol.shared.config import DatabaseConfig


@pytest.fixture()
def engine() -> Iterator[Engine]:
    engine = build_engine(DatabaseConfig(url="sqlite://"))
    init_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> Callable[[], Session]:
    return build_session_factory(engine)
