"""Validation of untyped user payloads."""

import re
from typing import Any

from pydantic import BaseModel, Field

from users_api.models.user import UserInput

NAME_REQUIRED = "Name is required and must be a non-empty string"
EMAIL_REQUIRED = "Email is required and must be a non-empty string"
EMAIL_INVALID = "Email must be a valid email address"

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class ValidationResult(BaseModel):
    """Outcome of validating a payload: trimmed input on success, errors otherwise."""

    errors: list[str] = Field(default_factory=list)
    value: UserInput | None = None

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def validate_user_data(data: Any) -> ValidationResult:
    """Check a parsed JSON value for a usable name and email.

    Both fields are checked independently so every defect is reported at
    once. The two email errors are mutually exclusive. The input is never
    mutated; a non-object payload is treated as having no fields.

    Args:
        data: Parsed request body of any JSON type

    Returns:
        ValidationResult with the trimmed UserInput when valid
    """
    fields = data if isinstance(data, dict) else {}
    name = fields.get("name")
    email = fields.get("email")

    errors: list[str] = []
    if not _non_empty_string(name):
        errors.append(NAME_REQUIRED)

    if not _non_empty_string(email):
        errors.append(EMAIL_REQUIRED)
    elif not EMAIL_PATTERN.fullmatch(email):
        errors.append(EMAIL_INVALID)

    if errors:
        return ValidationResult(errors=errors)
    return ValidationResult(value=UserInput(name=name.strip(), email=email.strip()))
