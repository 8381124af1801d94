"""Health endpoint."""

from fastapi import APIRouter

from ..models import HealthResponse
from ..state import get_state

router = APIRouter()


@router.get("/api/health", response_model=HealthResponse)
def health():
    state = get_state()
    return HealthResponse(
        status="healthy",
        loaded=state.is_loaded,
        categories=len(state.content.list_categories()),
        sessions=len(state.session_store),
    )
