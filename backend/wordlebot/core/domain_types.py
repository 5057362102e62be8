"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the opaque chat-platform identifier (string, stable per account)
    - GameNumber is the puzzle sequence index, positive
    - Score is either an attempt count 1–6 or the FAILURE_SCORE marker
    - All pipeline states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType, Union


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
GameNumber = NewType("GameNumber", int)


# ─── Value Types ─────────────────────────────────────────────────

MAX_ATTEMPTS = 6
FAILURE_SCORE = "X"

Score = Union[int, str]   # 1–6, or FAILURE_SCORE


# ─── Enums ───────────────────────────────────────────────────────

class SubmissionOutcome(str, Enum):
    """Terminal outcome of the storage half of the pipeline."""
    REJECTED = "rejected"
    DUPLICATE = "duplicate"
    STORED = "stored"
    STORE_FAILED = "store_failed"


class ScoringStage(str, Enum):
    """Terminal stage of the post-storage half (only reached after STORED)."""
    ANSWER_FAILED = "answer_failed"
    AWARDED = "awarded"
    AWARD_FAILED = "award_failed"
    AWARD_SKIPPED = "award_skipped"


class AwardStatus(str, Enum):
    """Delivery result reported by an AwardReporter."""
    DELIVERED = "delivered"
    FAILED = "failed"
    SKIPPED = "skipped"
