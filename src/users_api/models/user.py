"""User models for the Users API."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer


def format_timestamp(value: datetime) -> str:
    """Format a timestamp as ISO-8601 UTC with millisecond precision and a Z suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class User(BaseModel):
    """User entity model."""

    id: int = Field(..., description="Store-assigned identifier, immutable after creation")
    name: str = Field(..., description="Full name of the user")
    email: str = Field(..., description="Email address of the user")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), alias="createdAt", description="Creation timestamp"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
                "createdAt": "2024-05-01T12:00:00.000Z",
            }
        },
    )

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime) -> str:
        return format_timestamp(value)


class UserInput(BaseModel):
    """Validated, trimmed name and email ready to be stored."""

    name: str
    email: str


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""

    error: str
    details: list[str] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Validation failed",
                "details": ["Email must be a valid email address"],
            }
        }
    )
