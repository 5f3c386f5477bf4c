"""Pydantic models for the Users API."""

from users_api.models.health import HealthCheckResponse, WelcomeResponse
from users_api.models.user import ErrorResponse, User, UserInput

__all__ = ["ErrorResponse", "HealthCheckResponse", "User", "UserInput", "WelcomeResponse"]
