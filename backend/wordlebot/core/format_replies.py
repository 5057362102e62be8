"""Reply Formatting — user-visible text for each submission outcome.

Invariants:
    - REJECTED has no reply (ordinary chat is never answered by the pipeline)
    - STORED always gets the confirmation, whatever happened downstream
    - STORE_FAILED gets an apology that asks the user to retry later
"""

from wordlebot.core.domain_types import SubmissionOutcome
from wordlebot.core.parse_result import ParsedResult


def _label(result: ParsedResult) -> str:
    return f"Wordle {result.game_number:,}"


def format_reply(outcome: SubmissionOutcome, result: ParsedResult | None) -> str | None:
    """Build the reply the chat transport should send, or None for silence."""
    if outcome == SubmissionOutcome.REJECTED or result is None:
        return None
    if outcome == SubmissionOutcome.STORED:
        if result.solved:
            return (
                f"Saved {_label(result)}: solved in {result.attempts}/6. "
                "Nice work!"
            )
        return f"Saved {_label(result)}: X/6. Better luck tomorrow!"
    if outcome == SubmissionOutcome.DUPLICATE:
        return (
            f"You already submitted {_label(result)}. "
            "Only your first result counts."
        )
    return (
        f"Sorry, I couldn't save your {_label(result)} result right now. "
        "Please try again later."
    )
