"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.email_regex.application.exceptions import TutorialUnavailableError
from app.email_regex.infrastructure.content.tutorial_loader import (
    FileTutorialLoader,
    get_tutorial_loader,
)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: datetime
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check application health status.

    Returns:
        Health status with timestamp and version.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version="0.1.0",
    )


@router.get("/ready")
async def readiness_check(
    loader: FileTutorialLoader = Depends(get_tutorial_loader),
) -> dict[str, str]:
    """Check if application is ready to serve requests.

    The service is ready once the tutorial document can be loaded.

    Returns:
        Readiness status.
    """
    try:
        loader.load()
    except TutorialUnavailableError:
        return {"status": "not_ready", "tutorial": "unavailable"}
    return {"status": "ready", "tutorial": "loaded"}
