"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh SQLite database file under tmp_path
    - Real service URLs/tokens never used: env defaults point nowhere

Design Decisions:
    - SQLite via aiosqlite: supports ON CONFLICT and RETURNING, the two
      features the result store relies on
    - File-backed, not :memory:, so each session gets its own pooled
      connection and concurrent submissions race on the unique constraint
    - DatabaseSessionManager built with __new__: reuses its error mapping
      without opening a PostgreSQL pool
"""

import os

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

# Ensure tests don't accidentally reach real services
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("AWARD_SERVICE_URL", "")
os.environ.setdefault("AWARD_SERVICE_TOKEN", "bot-token-placeholder")

from wordlebot.db.base import Base  # noqa: E402
from wordlebot.infrastructure.database import DatabaseSessionManager  # noqa: E402
from wordlebot.infrastructure.result_store import SqlResultStore  # noqa: E402
import wordlebot.models  # noqa: E402,F401


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'wordlebot.db'}", echo=False,
        connect_args={"timeout": 30},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    return manager


@pytest.fixture
def result_store(db_manager):
    return SqlResultStore(db_manager)
