"""Reply formatting tests — one user-visible message per outcome."""

from wordlebot.core.domain_types import SubmissionOutcome
from wordlebot.core.format_replies import format_reply
from wordlebot.core.parse_result import parse_result


def test_rejected_is_silent():
    assert format_reply(SubmissionOutcome.REJECTED, None) is None


def test_stored_solved_confirms_attempts():
    reply = format_reply(SubmissionOutcome.STORED, parse_result("Wordle 1,234 3/6"))
    assert "Wordle 1,234" in reply
    assert "3/6" in reply


def test_stored_failed_confirms_x():
    reply = format_reply(SubmissionOutcome.STORED, parse_result("Wordle 500 X/6"))
    assert "X/6" in reply


def test_duplicate_is_neutral():
    reply = format_reply(SubmissionOutcome.DUPLICATE, parse_result("Wordle 500 2/6"))
    assert "already submitted" in reply


def test_store_failed_asks_to_retry():
    reply = format_reply(SubmissionOutcome.STORE_FAILED, parse_result("Wordle 500 2/6"))
    assert "try again later" in reply
