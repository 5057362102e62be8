"""User ORM — one row per chat participant.

Invariants:
    - user_id is the platform's opaque identifier (primary key, never generated)
    - Display fields are last-write-wins; created_at never changes after insert
    - Deleting a user cascades to their results

Design Decisions:
    - String primary key: chat platforms hand out 64-bit ids that are safer kept opaque
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wordlebot.db.base import Base


class User(Base):
    """Chat participant — owns all of their PuzzleResults."""
    __tablename__ = "users"

    user_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    results: Mapped[list["PuzzleResult"]] = relationship(
        "PuzzleResult", back_populates="user",
        cascade="all, delete-orphan", passive_deletes=True,
    )
