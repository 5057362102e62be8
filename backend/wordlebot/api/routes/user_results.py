"""User Results — read-only view of what a user has submitted."""

from fastapi import APIRouter, Depends, Query

from wordlebot.api.dependencies import get_result_store
from wordlebot.core.domain_types import UserId
from wordlebot.core.repository_protocols import ResultStore
from wordlebot.schemas.submission import StoredResultResponse

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("/{user_id}/results", response_model=list[StoredResultResponse])
async def list_user_results(
    user_id: str,
    limit: int = Query(30, ge=1, le=365),
    store: ResultStore = Depends(get_result_store),
):
    """Stored results for one user, newest puzzle first."""
    return await store.list_results(UserId(user_id), limit=limit)
