"""Award client tests — payload shape, token header, and receipts instead of raises."""

import json

import httpx

from wordlebot.core.domain_types import AwardStatus, FAILURE_SCORE, UserId
from wordlebot.infrastructure.award_client import HttpAwardReporter

AWARD_URL = "https://rewards.test/api/wordle/award"
TOKEN = "s3cret-bot-token"


def _reporter(handler, url=AWARD_URL, token=TOKEN):
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(record))
    return HttpAwardReporter(client, url=url, token=token), seen


async def test_posts_payload_with_token_header():
    reporter, seen = _reporter(lambda r: httpx.Response(200, json={"ok": True}))

    receipt = await reporter.report_award(UserId("1001"), "2024-11-04", "crane", 3)

    assert receipt.status == AwardStatus.DELIVERED
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == AWARD_URL
    assert request.headers["X-Bot-Token"] == TOKEN
    assert json.loads(request.content) == {
        "telegram_user_id": "1001",
        "wordle_day": "2024-11-04",
        "answer": "crane",
        "score": 3,
    }


async def test_failure_marker_sent_as_string():
    reporter, seen = _reporter(lambda r: httpx.Response(201))

    await reporter.report_award(UserId("1001"), "2022-11-01", "crane", FAILURE_SCORE)

    assert json.loads(seen[0].content)["score"] == "X"


async def test_non_success_returns_failed_receipt():
    reporter, _ = _reporter(lambda r: httpx.Response(401, text="bad token"))

    receipt = await reporter.report_award(UserId("1001"), "2024-11-04", "crane", 3)

    assert receipt.status == AwardStatus.FAILED
    assert receipt.status_code == 401
    assert receipt.error.code == "AWARD_DELIVERY_FAILED"


async def test_network_error_returns_failed_receipt():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    reporter, _ = _reporter(refuse)
    receipt = await reporter.report_award(UserId("1001"), "2024-11-04", "crane", 3)

    assert receipt.status == AwardStatus.FAILED
    assert receipt.status_code is None
    assert receipt.error is not None


async def test_placeholder_token_skips_call():
    reporter, seen = _reporter(
        lambda r: httpx.Response(200), token="bot-token-placeholder",
    )

    receipt = await reporter.report_award(UserId("1001"), "2024-11-04", "crane", 3)

    assert receipt.status == AwardStatus.SKIPPED
    assert seen == []


async def test_missing_url_skips_call():
    reporter, seen = _reporter(lambda r: httpx.Response(200), url="")

    assert reporter.enabled is False
    receipt = await reporter.report_award(UserId("1001"), "2024-11-04", "crane", 3)
    assert receipt.status == AwardStatus.SKIPPED
    assert seen == []
