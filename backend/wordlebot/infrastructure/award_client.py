"""Award Client — posts a scoring event to the operator's rewards service.

Invariants:
    - Never raises for delivery problems: returns an AwardReceipt instead
    - Skipped entirely (no request) when URL or token is missing or a placeholder
    - Payload is {telegram_user_id, wordle_day, answer, score}; score is an int or "X"
    - The shared token travels in a header, never in the body

Design Decisions:
    - Receipt over exception: the orchestrator decides to log and ignore, and
      tests can assert on the decision
"""

import logging

import httpx

from wordlebot.core.domain_types import AwardStatus, Score, UserId
from wordlebot.core.errors import AwardDeliveryError, ErrorContext
from wordlebot.core.repository_protocols import AwardReceipt

logger = logging.getLogger(__name__)

_PLACEHOLDER_MARKER = "placeholder"


def _is_configured(value: str | None) -> bool:
    return bool(value and value.strip()) and _PLACEHOLDER_MARKER not in value.lower()


class HttpAwardReporter:
    """AwardReporter posting JSON to a single configured endpoint."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str,
        token: str,
        token_header: str = "X-Bot-Token",
    ):
        self._client = client
        self._url = url
        self._token = token
        self._token_header = token_header

    @property
    def enabled(self) -> bool:
        return _is_configured(self._url) and _is_configured(self._token)

    async def report_award(
        self, user_id: UserId, wordle_day: str, answer: str, score: Score,
    ) -> AwardReceipt:
        if not self.enabled:
            return AwardReceipt(status=AwardStatus.SKIPPED)

        context = ErrorContext(user_id=user_id, wordle_day=wordle_day)
        payload = {
            "telegram_user_id": user_id,
            "wordle_day": wordle_day,
            "answer": answer,
            "score": score,
        }
        try:
            response = await self._client.post(
                self._url, json=payload,
                headers={self._token_header: self._token},
            )
        except httpx.HTTPError as e:
            return AwardReceipt(
                status=AwardStatus.FAILED,
                error=AwardDeliveryError(
                    str(e) or type(e).__name__, context=context,
                ),
            )

        if not response.is_success:
            return AwardReceipt(
                status=AwardStatus.FAILED,
                status_code=response.status_code,
                error=AwardDeliveryError(
                    f"HTTP {response.status_code}: {response.text[:200]}",
                    status_code=response.status_code, context=context,
                ),
            )
        logger.debug(
            "Award delivered",
            extra={"user_id": user_id, "wordle_day": wordle_day},
        )
        return AwardReceipt(
            status=AwardStatus.DELIVERED, status_code=response.status_code,
        )
