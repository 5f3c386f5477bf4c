"""Root and health check routes."""

from fastapi import APIRouter, Depends, Request

from users_api.config import Settings
from users_api.models.health import HealthCheckResponse, WelcomeResponse
from users_api.services import get_user_store
from users_api.services.user_store import UserStore

router = APIRouter(tags=["health"])


@router.get("/", response_model=WelcomeResponse)
async def welcome() -> WelcomeResponse:
    return WelcomeResponse()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(request: Request, store: UserStore = Depends(get_user_store)) -> HealthCheckResponse:
    """Report liveness, version and how many users are held in memory."""
    settings: Settings = request.app.state.settings
    return HealthCheckResponse(
        version=settings.app_version,
        environment=settings.environment,
        users=len(store),
    )
