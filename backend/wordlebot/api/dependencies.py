"""Route Dependencies — hand out the collaborators built in the lifespan.

Invariants:
    - Routes never construct clients or stores; they receive app.state singletons
    - Tests swap these via app.dependency_overrides
"""

from fastapi import Request

from wordlebot.core.repository_protocols import ResultStore
from wordlebot.services.submission_orchestrator import SubmissionOrchestrator


def get_orchestrator(request: Request) -> SubmissionOrchestrator:
    return request.app.state.orchestrator


def get_result_store(request: Request) -> ResultStore:
    return request.app.state.result_store
