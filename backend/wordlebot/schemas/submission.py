"""Submission Schemas — the inbound chat event and the outcome sent back.

Invariants:
    - SubmissionEvent.user_id: non-empty after strip
    - SubmissionEvent.text: non-empty, bounded (a share text is a few hundred chars)
    - SubmissionResponse mirrors SubmissionReceipt; reply None means "stay silent"
"""

from pydantic import BaseModel, Field, field_validator

from wordlebot.core.domain_types import ScoringStage, SubmissionOutcome


class SubmissionEvent(BaseModel):
    """One non-command text message forwarded by the chat transport."""
    user_id: str = Field(min_length=1, max_length=64)
    username: str | None = Field(None, max_length=255)
    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)
    text: str = Field(min_length=1, max_length=4096)

    @field_validator("user_id")
    @classmethod
    def strip_user_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("user_id cannot be empty or whitespace")
        return v


class ParsedResultResponse(BaseModel):
    game_number: int
    attempts: int | None
    solved: bool
    pattern: str | None
    hard_mode: bool = False


class SubmissionResponse(BaseModel):
    """Outcome for the transport to render."""
    outcome: SubmissionOutcome
    scoring: ScoringStage | None = None
    reply: str | None = None
    result: ParsedResultResponse | None = None


class StoredResultResponse(BaseModel):
    game_number: int
    attempts: int | None
    solved: bool
    pattern: str | None
    share_text: str
    reported_at: str
