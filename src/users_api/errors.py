"""API error type and exception handlers."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_USER_ID = "Invalid user ID"
USER_NOT_FOUND = "User not found"
VALIDATION_FAILED = "Validation failed"
INVALID_JSON_BODY = "Invalid JSON body"
INTERNAL_ERROR = "Internal server error"


class ApiError(Exception):
    """Request failure rendered as ``{"error": ..., "details": [...]}``."""

    def __init__(self, status_code: int, error: str, details: list[str] | None = None) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details

    def to_content(self) -> dict:
        content: dict = {"error": self.error}
        if self.details is not None:
            content["details"] = self.details
        return content


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error envelope handlers to the application."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=True)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR},
        )
