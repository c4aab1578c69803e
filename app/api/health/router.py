from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.core.schemas import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    now = datetime.now(timezone.utc)
    return HealthResponse(
        success=True,
        message="Server is running",
        timestamp=now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        version=settings.app_version,
    )
