"""Wordle Bot API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WordleBotError → structured JSON responses
    - Database, HTTP client and pipeline built once in the lifespan and
      injected; nothing below main.py reads settings

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - One httpx.AsyncClient shared by answer and award clients: pooled
      connections, one timeout
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from wordlebot.api.error_handlers import register_error_handlers
from wordlebot.api.routes import health, submissions, user_results
from wordlebot.config import get_settings
from wordlebot.infrastructure.answer_client import HttpAnswerResolver
from wordlebot.infrastructure.award_client import HttpAwardReporter
from wordlebot.infrastructure.database import init_db
from wordlebot.infrastructure.observability import setup_logging
from wordlebot.infrastructure.result_store import SqlResultStore
from wordlebot.services.submission_orchestrator import SubmissionOrchestrator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await db.create_schema()

    http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    store = SqlResultStore(db)
    awards = HttpAwardReporter(
        http_client,
        url=settings.award_service_url,
        token=settings.award_service_token,
        token_header=settings.award_token_header,
    )
    app.state.result_store = store
    app.state.orchestrator = SubmissionOrchestrator(
        store=store,
        answers=HttpAnswerResolver(http_client, settings.answer_service_url),
        awards=awards,
    )
    if not awards.enabled:
        logger.warning("Award service not configured; awards will be skipped")
    logger.info("Wordle Bot API started")
    yield
    logger.info("Wordle Bot API shutting down")
    await http_client.aclose()
    await db.dispose()


app = FastAPI(
    title="Wordle Bot API", version="1.0.0", lifespan=lifespan,
)

register_error_handlers(app)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(submissions.router)
app.include_router(user_results.router)
