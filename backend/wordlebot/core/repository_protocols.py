"""Boundary Protocols — contracts between the orchestrator and its collaborators.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations constructed once at startup and injected

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no base class
    - AwardReporter returns a receipt instead of raising: the caller owns the
      decision to ignore a failed delivery
"""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from wordlebot.core.domain_types import AwardStatus, GameNumber, Score, UserId
from wordlebot.core.errors import AwardDeliveryError
from wordlebot.core.parse_result import ParsedResult


@dataclass(frozen=True)
class ChatUser:
    """Identity and display fields of the submitting chat participant."""
    user_id: UserId
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None


@dataclass(frozen=True)
class AwardReceipt:
    """What happened to one award notification."""
    status: AwardStatus
    status_code: int | None = None
    error: AwardDeliveryError | None = None


class ResultStore(Protocol):
    """Contract for users/results persistence — implemented by shell."""
    async def upsert_user(self, user: ChatUser) -> None: ...
    async def record_result(self, user_id: UserId, result: ParsedResult) -> bool: ...
    async def get_result(
        self, user_id: UserId, game_number: GameNumber,
    ) -> dict | None: ...
    async def list_results(self, user_id: UserId, limit: int = 30) -> list[dict]: ...


class AnswerResolver(Protocol):
    """Contract for the canonical-answer lookup — raises AnswerUnavailableError."""
    async def resolve_answer(self, day: date) -> str: ...


class AwardReporter(Protocol):
    """Contract for the rewards notification — never raises for delivery problems."""
    async def report_award(
        self, user_id: UserId, wordle_day: str, answer: str, score: Score,
    ) -> AwardReceipt: ...
