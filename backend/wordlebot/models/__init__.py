"""ORM Models — SQLAlchemy declarative models for users and their results.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the aggregate root; results are scoped by user_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from wordlebot.models.user import User  # noqa: F401
from wordlebot.models.puzzle_result import PuzzleResult  # noqa: F401
