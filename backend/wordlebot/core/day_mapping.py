"""Day Mapper — puzzle sequence number to calendar date.

Invariants:
    - Game 0 is WORDLE_EPOCH (2021-06-19); game n is epoch + n days
    - Monotonic and bijective on non-negative integers
    - Dates are calendar dates (no time, no timezone)
    - MAX_GAME_NUMBER is the last game with a representable date; it is far
      below the int4 range of results.game_number
"""

from datetime import date, timedelta

WORDLE_EPOCH = date(2021, 6, 19)
MAX_GAME_NUMBER = (date.max - WORDLE_EPOCH).days


def wordle_date(game_number: int) -> date:
    """Calendar date on which puzzle `game_number` was published."""
    if not 0 <= game_number <= MAX_GAME_NUMBER:
        raise ValueError(f"game_number out of range: {game_number}")
    return WORDLE_EPOCH + timedelta(days=game_number)


def wordle_day(game_number: int) -> str:
    """ISO form (YYYY-MM-DD) used on the wire and in logs."""
    return wordle_date(game_number).isoformat()


def game_number_for(day: date) -> int:
    """Inverse of wordle_date. Dates before the epoch are rejected."""
    delta = (day - WORDLE_EPOCH).days
    if delta < 0:
        raise ValueError(f"{day.isoformat()} is before the first puzzle")
    return delta
