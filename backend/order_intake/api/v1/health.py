from datetime import datetime, timezone

from fastapi import APIRouter, Request

from order_intake import __version__
from order_intake.schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        environment=request.app.state.settings.environment,
        version=__version__,
    )
