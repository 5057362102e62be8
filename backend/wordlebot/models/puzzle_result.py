"""PuzzleResult ORM — one user's report for one puzzle.

Invariants:
    - (user_id, game_number) is unique: the idempotency gate for awards
    - attempts is NULL iff solved is false
    - share_text stores the trimmed original message verbatim

Design Decisions:
    - Named unique constraint: the store's ON CONFLICT clause targets its columns
    - ondelete=CASCADE on the FK: results disappear only with their user
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Boolean, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wordlebot.db.base import Base


class PuzzleResult(Base):
    """Stored result — first submission for a (user, game) pair wins."""
    __tablename__ = "results"
    __table_args__ = (
        UniqueConstraint("user_id", "game_number", name="uq_results_user_game"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    game_number: Mapped[int] = mapped_column(Integer, nullable=False)
    attempts: Mapped[int | None] = mapped_column(Integer, nullable=True)
    solved: Mapped[bool] = mapped_column(Boolean, nullable=False)
    pattern: Mapped[str | None] = mapped_column(Text, nullable=True)
    share_text: Mapped[str] = mapped_column(Text, nullable=False)
    reported_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    user: Mapped["User"] = relationship("User", back_populates="results")

    def to_dict(self) -> dict:
        return {
            "game_number": self.game_number,
            "attempts": self.attempts,
            "solved": self.solved,
            "pattern": self.pattern,
            "share_text": self.share_text,
            "reported_at": self.reported_at.isoformat(),
        }
