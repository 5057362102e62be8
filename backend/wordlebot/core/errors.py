"""Error Hierarchy — typed, categorized exceptions for every pipeline failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Storage errors are the only ones surfaced to the submitting user
    - Downstream errors (answer lookup, award delivery) are logged, never replied
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with WordleBotError base: FastAPI global handler catches all
    - Parse rejection is NOT an error: parse_result returns None for ordinary chat text
    - Duplicate submission is NOT an error: it is a SubmissionOutcome
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Which submission an error belongs to, for logs and the REST envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    game_number: int | None = None
    wordle_day: str | None = None
    user_message: str | None = None


class WordleBotError(Exception):
    """Base exception for all service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "user_id": self.context.user_id,
                    "game_number": self.context.game_number,
                    "wordle_day": self.context.wordle_day,
                },
            }
        }


# ─── Storage Errors (user-visible) ──────────────────────────────

STORAGE_UNAVAILABLE_MESSAGE = "Results are temporarily unavailable, try again later"


class StorageUnavailableError(WordleBotError):
    """Durable store unreachable or failed mid-operation."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        context = context or ErrorContext()
        context.user_message = context.user_message or STORAGE_UNAVAILABLE_MESSAGE
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class StorageConstraintError(WordleBotError):
    """Integrity error other than the expected (user, game) duplicate."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage constraint violated: {message}",
            "STORAGE_CONSTRAINT_VIOLATION", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )


# ─── Downstream Errors (logged only) ────────────────────────────

class AnswerUnavailableError(WordleBotError):
    """Answer service unreachable, non-2xx, or malformed body."""
    def __init__(
        self,
        message: str,
        reason: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Answer lookup failed ({reason}): {message}",
            "ANSWER_UNAVAILABLE",
            ErrorCategory.TIMEOUT if reason == "timeout" else ErrorCategory.EXTERNAL_API,
            ErrorSeverity.WARNING, context, 502,
        )
        self.reason = reason
        self.status_code = status_code


class AwardDeliveryError(WordleBotError):
    """Award service rejected or never received the scoring event."""
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Award delivery failed: {message}",
            "AWARD_DELIVERY_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.WARNING, context, 502,
        )
        self.status_code = status_code
