"""Health and welcome response models."""

from pydantic import BaseModel, ConfigDict, Field


class HealthCheckResponse(BaseModel):
    """Liveness report with the number of users currently held in memory."""

    status: str = "ok"
    version: str
    environment: str
    users: int = Field(..., ge=0, description="Number of users in the store")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"status": "ok", "version": "0.1.0", "environment": "development", "users": 2}
        }
    )


class WelcomeResponse(BaseModel):
    """Root endpoint greeting."""

    message: str = "Welcome to the API"
