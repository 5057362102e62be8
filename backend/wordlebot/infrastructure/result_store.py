"""SQL Result Store — users/results persistence with an atomic idempotency gate.

Invariants:
    - upsert_user: one row per user_id, display fields last-write-wins
    - record_result: INSERT ... ON CONFLICT (user_id, game_number) DO NOTHING;
      True iff a row was created, the existing row is never touched
    - Each operation runs in its own session and commits before returning

Design Decisions:
    - Conditional insert over SELECT-then-INSERT: concurrent submissions for the
      same pair race inside the database, never in Python, so no locking
    - RETURNING id decides "inserted": works identically on PostgreSQL and SQLite
    - Dialect-specific insert() chosen once at construction
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite

from wordlebot.core.domain_types import GameNumber, UserId
from wordlebot.core.parse_result import ParsedResult
from wordlebot.core.repository_protocols import ChatUser
from wordlebot.infrastructure.database import DatabaseSessionManager
from wordlebot.models.puzzle_result import PuzzleResult
from wordlebot.models.user import User

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SqlResultStore:
    """ResultStore backed by the shared DatabaseSessionManager."""

    def __init__(self, db: DatabaseSessionManager):
        try:
            self._insert = _DIALECT_INSERTS[db.dialect_name]
        except KeyError:
            raise ValueError(
                f"Unsupported database dialect: {db.dialect_name}",
            ) from None
        self._db = db

    async def upsert_user(self, user: ChatUser) -> None:
        now = datetime.now(timezone.utc)
        stmt = self._insert(User).values(
            user_id=user.user_id,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id"],
            set_={
                "username": stmt.excluded.username,
                "first_name": stmt.excluded.first_name,
                "last_name": stmt.excluded.last_name,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        async with self._db.session() as db:
            await db.execute(stmt)
            await db.commit()

    async def record_result(self, user_id: UserId, result: ParsedResult) -> bool:
        stmt = (
            self._insert(PuzzleResult)
            .values(
                user_id=user_id,
                game_number=result.game_number,
                attempts=result.attempts,
                solved=result.solved,
                pattern=result.pattern,
                share_text=result.share_text,
                reported_at=datetime.now(timezone.utc),
            )
            .on_conflict_do_nothing(
                index_elements=["user_id", "game_number"],
            )
            .returning(PuzzleResult.id)
        )
        async with self._db.session() as db:
            inserted_id = (await db.execute(stmt)).scalar_one_or_none()
            await db.commit()

        if inserted_id is None:
            logger.info(
                "Duplicate result ignored",
                extra={"user_id": user_id, "game_number": result.game_number},
            )
            return False
        return True

    async def get_result(
        self, user_id: UserId, game_number: GameNumber,
    ) -> dict | None:
        async with self._db.session() as db:
            row = (await db.execute(
                select(PuzzleResult).where(
                    PuzzleResult.user_id == user_id,
                    PuzzleResult.game_number == game_number,
                ),
            )).scalar_one_or_none()
        return row.to_dict() if row else None

    async def list_results(self, user_id: UserId, limit: int = 30) -> list[dict]:
        """Newest puzzle first."""
        async with self._db.session() as db:
            rows = (await db.execute(
                select(PuzzleResult)
                .where(PuzzleResult.user_id == user_id)
                .order_by(PuzzleResult.game_number.desc())
                .limit(limit),
            )).scalars().all()
        return [row.to_dict() for row in rows]
