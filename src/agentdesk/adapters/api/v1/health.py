from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from agentdesk.core.config.settings import settings

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    env: str
    version: str
    backend: str
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness of the console API itself; the backend is not probed."""
    return HealthResponse(
        status="ok",
        env=settings.APP_ENV,
        version=settings.VERSION,
        backend=settings.API_BASE_URL,
        timestamp=datetime.now(timezone.utc),
    )
