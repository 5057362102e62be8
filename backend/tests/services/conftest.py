"""Service test fixtures — FastAPI test client wired to fakes and a SQLite store.

Invariants:
    - Route dependencies overridden: no lifespan, no real HTTP clients
    - db_manager patched so the readiness probe sees the test database

Design Decisions:
    - ASGITransport does not run the lifespan, so app.state stays empty and
      every collaborator comes from dependency_overrides
"""

import pytest
from httpx import ASGITransport, AsyncClient

import wordlebot.infrastructure.database as db_module
from wordlebot.api.dependencies import get_orchestrator, get_result_store
from wordlebot.main import app
from wordlebot.services.submission_orchestrator import SubmissionOrchestrator

from tests.services.fakes import FakeAnswerResolver, FakeAwardReporter


@pytest.fixture
def fake_answers():
    return FakeAnswerResolver("crane")


@pytest.fixture
def fake_awards():
    return FakeAwardReporter()


@pytest.fixture
async def client(db_manager, result_store, fake_answers, fake_awards):
    """API client with the pipeline built over the SQLite test store."""
    orchestrator = SubmissionOrchestrator(result_store, fake_answers, fake_awards)
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_result_store] = lambda: result_store

    original_manager = db_module.db_manager
    db_module.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
