"""Submissions — entry point for text forwarded by the chat transport.

Invariants:
    - One POST per non-command chat message
    - 200 for rejected/duplicate/stored, 503 for store_failed (same body shape)
    - reply is None when the transport should stay silent
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from wordlebot.api.dependencies import get_orchestrator
from wordlebot.core.domain_types import SubmissionOutcome
from wordlebot.schemas.submission import (
    ParsedResultResponse, SubmissionEvent, SubmissionResponse,
)
from wordlebot.services.submission_orchestrator import (
    SubmissionOrchestrator, SubmissionReceipt,
)

router = APIRouter(prefix="/api/v1/submissions", tags=["submissions"])


def _to_response(receipt: SubmissionReceipt) -> SubmissionResponse:
    parsed = receipt.result
    return SubmissionResponse(
        outcome=receipt.outcome,
        scoring=receipt.scoring,
        reply=receipt.reply,
        result=ParsedResultResponse(
            game_number=parsed.game_number,
            attempts=parsed.attempts,
            solved=parsed.solved,
            pattern=parsed.pattern,
            hard_mode=parsed.hard_mode,
        ) if parsed else None,
    )


@router.post("", response_model=SubmissionResponse)
async def submit_result(
    body: SubmissionEvent,
    orchestrator: SubmissionOrchestrator = Depends(get_orchestrator),
):
    """Run one chat message through the ingestion pipeline."""
    receipt = await orchestrator.submit(body)
    response = _to_response(receipt)
    if receipt.outcome == SubmissionOutcome.STORE_FAILED:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=response.model_dump(mode="json"),
        )
    return response
