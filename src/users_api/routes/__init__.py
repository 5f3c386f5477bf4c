"""Route initialization module."""

from fastapi import APIRouter

from users_api.routes.health import router as health_router
from users_api.routes.users import router as user_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(user_router)


__all__ = ["api_router"]
