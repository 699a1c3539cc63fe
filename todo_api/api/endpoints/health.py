"""Health check endpoint. No dependencies; never touches storage."""

from fastapi import APIRouter

from todo_api.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return fixed OK status for liveness."""
    return HealthResponse()
