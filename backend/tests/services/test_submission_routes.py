"""Submission routes — HTTP contract for the chat transport.

Invariants:
    - POST /submissions returns outcome, scoring, reply, and parsed result
    - store_failed answers 503 with the same body shape
    - Invalid events rejected with the VALIDATION_ERROR envelope; the chat
      text is never written to the log
    - Storage errors on reads render the STORAGE_UNAVAILABLE envelope
    - GET /users/{id}/results lists stored results newest first
"""

import logging

from wordlebot.api.dependencies import get_orchestrator, get_result_store
from wordlebot.main import app
from wordlebot.services.submission_orchestrator import SubmissionOrchestrator

from tests.services.fakes import UnavailableStore

SCENARIO_A = "Wordle 1,234 3/6\n🟩🟨⬜"


def _event(text: str, user_id: str = "1001") -> dict:
    return {"user_id": user_id, "username": "alice", "first_name": "Alice", "text": text}


async def test_first_submission_returns_stored(client, fake_awards):
    res = await client.post("/api/v1/submissions", json=_event(SCENARIO_A))

    assert res.status_code == 200
    body = res.json()
    assert body["outcome"] == "stored"
    assert body["scoring"] == "awarded"
    assert body["result"] == {
        "game_number": 1234, "attempts": 3, "solved": True,
        "pattern": "🟩🟨⬜", "hard_mode": False,
    }
    assert "Wordle 1,234" in body["reply"]
    assert len(fake_awards.calls) == 1


async def test_resubmission_returns_duplicate(client, fake_awards):
    await client.post("/api/v1/submissions", json=_event(SCENARIO_A))
    res = await client.post("/api/v1/submissions", json=_event(SCENARIO_A))

    assert res.status_code == 200
    assert res.json()["outcome"] == "duplicate"
    assert len(fake_awards.calls) == 1


async def test_plain_text_is_rejected_silently(client):
    res = await client.post("/api/v1/submissions", json=_event("hello there"))

    assert res.status_code == 200
    assert res.json() == {
        "outcome": "rejected", "scoring": None, "reply": None, "result": None,
    }


async def test_store_failure_returns_503_with_reply(client, fake_answers, fake_awards):
    app.dependency_overrides[get_orchestrator] = lambda: SubmissionOrchestrator(
        UnavailableStore(), fake_answers, fake_awards,
    )

    res = await client.post("/api/v1/submissions", json=_event(SCENARIO_A))

    assert res.status_code == 503
    body = res.json()
    assert body["outcome"] == "store_failed"
    assert "try again later" in body["reply"]


async def test_blank_user_id_is_validation_error(client):
    res = await client.post("/api/v1/submissions", json=_event(SCENARIO_A, user_id="  "))

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_missing_text_is_validation_error(client):
    res = await client.post("/api/v1/submissions", json={"user_id": "1001"})

    assert res.status_code == 400


async def test_list_user_results(client):
    for text in ("Wordle 10 4/6", "Wordle 12 X/6", "Wordle 11 2/6"):
        await client.post("/api/v1/submissions", json=_event(text))

    res = await client.get("/api/v1/users/1001/results")

    assert res.status_code == 200
    games = [r["game_number"] for r in res.json()]
    assert games == [12, 11, 10]
    assert res.json()[0]["attempts"] is None


async def test_health_and_readiness(client):
    assert (await client.get("/api/v1/health/")).status_code == 200
    ready = await client.get("/api/v1/health/ready")
    assert ready.status_code == 200
    assert ready.json()["checks"]["database"] == "healthy"


async def test_validation_log_names_fields_not_text(client, caplog):
    caplog.set_level(logging.WARNING, logger="wordlebot.api.error_handlers")
    secret = "my private chat " * 300

    res = await client.post(
        "/api/v1/submissions", json={"user_id": "1001", "text": secret},
    )

    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "body.text"
    assert "body.text" in caplog.text
    assert "my private chat" not in caplog.text


async def test_store_outage_on_read_returns_domain_envelope(client, caplog):
    app.dependency_overrides[get_result_store] = lambda: UnavailableStore()

    res = await client.get("/api/v1/users/1001/results")

    assert res.status_code == 503
    error = res.json()["error"]
    assert error["code"] == "STORAGE_UNAVAILABLE"
    assert error["category"] == "database"
    assert error["severity"] == "critical"
    assert "try again later" in error["message"]
    assert any(
        r.levelno == logging.CRITICAL
        and getattr(r, "error_code", None) == "STORAGE_UNAVAILABLE"
        for r in caplog.records
    )
