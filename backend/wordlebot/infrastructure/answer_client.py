"""Answer Client — fetches the canonical solution for a puzzle date.

Invariants:
    - Exactly one GET per call: no retry, no caching
    - Returns the solution lowercased and stripped
    - Every failure (connect, timeout, non-2xx, bad JSON, missing field)
      raised as AnswerUnavailableError

Design Decisions:
    - httpx.AsyncClient injected: one pooled client per process, timeout set there
"""

import logging
from datetime import date

import httpx

from wordlebot.core.errors import AnswerUnavailableError, ErrorContext

logger = logging.getLogger(__name__)


class HttpAnswerResolver:
    """AnswerResolver for the `GET /{YYYY-MM-DD}.json -> {solution}` service."""

    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self._client = client
        self._base_url = base_url.rstrip("/")

    async def resolve_answer(self, day: date) -> str:
        wordle_day = day.isoformat()
        url = f"{self._base_url}/{wordle_day}.json"
        context = ErrorContext(wordle_day=wordle_day)
        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as e:
            raise AnswerUnavailableError(str(e) or "timed out", "timeout", context=context)
        except httpx.HTTPError as e:
            raise AnswerUnavailableError(str(e), "connection_error", context=context)

        if not response.is_success:
            raise AnswerUnavailableError(
                f"HTTP {response.status_code} from {url}", "bad_status",
                status_code=response.status_code, context=context,
            )
        try:
            body = response.json()
        except ValueError:
            raise AnswerUnavailableError(
                "response body is not JSON", "malformed_body",
                status_code=response.status_code, context=context,
            )

        solution = body.get("solution") if isinstance(body, dict) else None
        if not isinstance(solution, str) or not solution.strip():
            raise AnswerUnavailableError(
                "response has no solution", "malformed_body",
                status_code=response.status_code, context=context,
            )
        logger.debug("Answer resolved", extra={"wordle_day": wordle_day})
        return solution.strip().lower()
