"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from users_api.config import Settings, get_settings
from users_api.errors import register_exception_handlers
from users_api.routes import api_router
from users_api.services.user_store import UserStore

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging at the named level."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    settings: Settings = app.state.settings
    logger.info(f"{settings.app_name} v{settings.app_version} started")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log level: {settings.log_level}")

    yield

    logger.info(f"{settings.app_name} shutting down with {len(app.state.user_store)} users in memory")


def create_app(settings: Settings | None = None, store: UserStore | None = None) -> FastAPI:
    """Build the application with its own settings and user store.

    Args:
        settings: Application settings, loaded from the environment if None
        store: User store, a fresh empty one if None

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="In-memory users CRUD service",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.user_store = store if store is not None else UserStore()

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = app.state.settings
    logger.info(f"Server is running on http://{settings.api_host}:{settings.api_port}")
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
