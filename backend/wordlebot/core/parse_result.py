"""Result Parser — turns a shared Wordle message into a structured result.

Invariants:
    - Pure: no IO, no logging, deterministic
    - Ordinary chat text yields None, never an exception
    - attempts is set iff solved; pattern is None iff no grid lines follow the header
    - share_text is the trimmed input, verbatim
    - Game numbers past MAX_GAME_NUMBER are not reports (no calendar date)
    - Up to three symbol characters may trail "/6" (hard-mode "*", an emoji
      with its variation selector); letters and digits there are rejected

Design Decisions:
    - Header matched on the first line only: the grid and any trailing chatter
      never influence the score
    - Thousands separators (1,234 / 1.234 / narrow no-break space) stripped
      before int(): newer share texts group the sequence number
"""

import re
from dataclasses import dataclass

from wordlebot.core.day_mapping import MAX_GAME_NUMBER
from wordlebot.core.domain_types import FAILURE_SCORE, GameNumber, Score

_SEPARATORS = ",.\u00a0\u202f"

_HEADER = re.compile(
    r"^Wordle\s+"
    r"(?P<number>\d+(?:[" + _SEPARATORS + r"]\d+)*)\s+"
    r"(?P<attempts>[1-6Xx])/6"
    r"(?P<decoration>[^\s\w]{0,3})$"
)

_STRIP_SEPARATORS = str.maketrans("", "", _SEPARATORS)


@dataclass(frozen=True)
class ParsedResult:
    """One user's report for one puzzle, as read from the share text."""
    game_number: GameNumber
    attempts: int | None
    solved: bool
    pattern: str | None
    share_text: str
    hard_mode: bool = False

    @property
    def score(self) -> Score:
        """Attempt count when solved, FAILURE_SCORE otherwise."""
        return self.attempts if self.solved else FAILURE_SCORE


def parse_result(text: str) -> ParsedResult | None:
    """Parse a share message; None when the text is not a Wordle report."""
    share_text = (text or "").strip()
    if not share_text:
        return None

    lines = share_text.splitlines()
    match = _HEADER.match(lines[0].strip())
    if not match:
        return None

    game_number = _parse_game_number(match.group("number"))
    if game_number is None:
        return None

    token = match.group("attempts").upper()
    solved = token != FAILURE_SCORE
    grid = [line.strip() for line in lines[1:] if line.strip()]

    return ParsedResult(
        game_number=game_number,
        attempts=int(token) if solved else None,
        solved=solved,
        pattern="\n".join(grid) or None,
        share_text=share_text,
        hard_mode="*" in match.group("decoration"),
    )


def _parse_game_number(raw: str) -> GameNumber | None:
    try:
        value = int(raw.translate(_STRIP_SEPARATORS))
    except ValueError:
        return None
    if not 0 < value <= MAX_GAME_NUMBER:
        return None
    return GameNumber(value)
