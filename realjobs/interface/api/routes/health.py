"""Health check route."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from realjobs.config import Settings

API_VERSION = "0.1.0"

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness report with build and feature details."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    environment: str
    sentiment_enabled: bool  # False means every comment is classified neutral


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is serving requests.

    Does not touch the database, so it stays up while Postgres is degraded.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=API_VERSION,
        git_sha=settings.git_sha,
        environment=settings.environment,
        sentiment_enabled=bool(settings.sentiment.api_key),
    )
