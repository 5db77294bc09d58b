from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from pomstore.adapters.repository import DefaultRepositoryContent, LegacyRepositoryContent
from pomstore.adapters.sqlalchemy import start_mappers
from pomstore.adapters.sqlalchemy.migrations import upgrade_head
from pomstore.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, shutdown, startup

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    start_mappers()
    upgrade_head(engine=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True, expire_on_commit=False)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()


@pytest.fixture
def default_content(tmp_path: Path) -> DefaultRepositoryContent:
    root = tmp_path / "internal"
    root.mkdir()
    return DefaultRepositoryContent("internal", root)


@pytest.fixture
def legacy_content(tmp_path: Path) -> LegacyRepositoryContent:
    root = tmp_path / "legacy"
    root.mkdir()
    return LegacyRepositoryContent("legacy", root)
