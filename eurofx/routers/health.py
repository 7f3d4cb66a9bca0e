from fastapi import APIRouter, Depends

from eurofx.core.config import Settings
from eurofx.models.conversion import HealthOut
from eurofx.routers.convert import get_app_settings

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut, summary="Liveness probe")
async def health(settings: Settings = Depends(get_app_settings)):
    # Does not touch the upstream feed.
    return HealthOut(status="ok", version=settings.version, rates_url=str(settings.rates_url))
