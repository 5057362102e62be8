"""Submission Orchestrator — parse, store once, then resolve the answer and award.

Invariants:
    - Storage is the idempotency gate: answer lookup and award run only when
      record_result reports a fresh insert, so each (user, game) is awarded at most once
    - Storage failures are the only failures surfaced to the user
    - Post-storage failures (answer, award) are logged and absorbed; the user
      still gets the success confirmation
    - Rejected text never touches storage

Design Decisions:
    - Collaborators injected as Protocols: fakes in tests record invocations
    - Receipt returned instead of sending replies: the transport renders it
    - No locks: concurrent pipelines serialize only on the store's unique constraint

State machine (per submission):
    Received -> Rejected | Parsed
    Parsed   -> Duplicate | StoreFailed | Stored
    Stored   -> AnswerFailed | AnswerResolved
    AnswerResolved -> Awarded | AwardFailed | AwardSkipped
"""

import logging
from dataclasses import dataclass

from wordlebot.core.day_mapping import wordle_date
from wordlebot.core.domain_types import (
    AwardStatus, ScoringStage, SubmissionOutcome, UserId,
)
from wordlebot.core.errors import (
    AnswerUnavailableError, StorageConstraintError, StorageUnavailableError,
)
from wordlebot.core.format_replies import format_reply
from wordlebot.core.parse_result import ParsedResult, parse_result
from wordlebot.core.repository_protocols import (
    AnswerResolver, AwardReporter, ChatUser, ResultStore,
)
from wordlebot.schemas.submission import SubmissionEvent

logger = logging.getLogger(__name__)

COMMAND_PREFIX = "/"


@dataclass(frozen=True)
class SubmissionReceipt:
    """Final state of one pipeline run."""
    outcome: SubmissionOutcome
    reply: str | None = None
    result: ParsedResult | None = None
    scoring: ScoringStage | None = None


class SubmissionOrchestrator:
    """Runs one submission through the pipeline."""

    def __init__(
        self,
        store: ResultStore,
        answers: AnswerResolver,
        awards: AwardReporter,
    ):
        self._store = store
        self._answers = answers
        self._awards = awards

    async def submit(self, event: SubmissionEvent) -> SubmissionReceipt:
        if event.text.lstrip().startswith(COMMAND_PREFIX):
            return SubmissionReceipt(outcome=SubmissionOutcome.REJECTED)
        result = parse_result(event.text)
        if result is None:
            return SubmissionReceipt(outcome=SubmissionOutcome.REJECTED)

        user_id = UserId(event.user_id)
        log_extra = {"user_id": user_id, "game_number": result.game_number}
        try:
            await self._store.upsert_user(ChatUser(
                user_id=user_id,
                username=event.username,
                first_name=event.first_name,
                last_name=event.last_name,
            ))
            inserted = await self._store.record_result(user_id, result)
        except (StorageUnavailableError, StorageConstraintError) as e:
            logger.error(
                f"Failed to store result: {e.message}",
                extra={**log_extra, "error_code": e.code},
            )
            return self._receipt(SubmissionOutcome.STORE_FAILED, result)

        if not inserted:
            return self._receipt(SubmissionOutcome.DUPLICATE, result)

        scoring = await self._score(user_id, result)
        logger.info(
            "Result stored",
            extra={**log_extra, "outcome": SubmissionOutcome.STORED.value,
                   "scoring": scoring.value},
        )
        return self._receipt(SubmissionOutcome.STORED, result, scoring)

    async def _score(self, user_id: UserId, result: ParsedResult) -> ScoringStage:
        """Answer lookup then award. Never raises: the result is already stored."""
        log_extra = {"user_id": user_id, "game_number": result.game_number}
        try:
            day = wordle_date(result.game_number)
            log_extra["wordle_day"] = day.isoformat()
            answer = await self._answers.resolve_answer(day)
        except AnswerUnavailableError as e:
            logger.warning(
                f"Answer lookup failed, award not sent: {e.message}",
                extra={**log_extra, "error_code": e.code,
                       "status_code": e.status_code},
            )
            return ScoringStage.ANSWER_FAILED
        except Exception as e:
            logger.error(
                f"Unexpected answer lookup error: {e}",
                extra=log_extra, exc_info=True,
            )
            return ScoringStage.ANSWER_FAILED

        try:
            receipt = await self._awards.report_award(
                user_id, day.isoformat(), answer, result.score,
            )
        except Exception as e:
            logger.error(
                f"Unexpected award reporter error: {e}",
                extra=log_extra, exc_info=True,
            )
            return ScoringStage.AWARD_FAILED

        if receipt.status == AwardStatus.SKIPPED:
            logger.info("Award service not configured, skipping", extra=log_extra)
            return ScoringStage.AWARD_SKIPPED
        if receipt.status == AwardStatus.FAILED:
            logger.warning(
                f"Award delivery failed (ignored): "
                f"{receipt.error.message if receipt.error else 'unknown'}",
                extra={**log_extra, "status_code": receipt.status_code,
                       "error_code": "AWARD_DELIVERY_FAILED"},
            )
            return ScoringStage.AWARD_FAILED
        return ScoringStage.AWARDED

    @staticmethod
    def _receipt(
        outcome: SubmissionOutcome,
        result: ParsedResult,
        scoring: ScoringStage | None = None,
    ) -> SubmissionReceipt:
        return SubmissionReceipt(
            outcome=outcome,
            reply=format_reply(outcome, result),
            result=result,
            scoring=scoring,
        )
