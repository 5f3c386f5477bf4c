"""Tests for user payload validation."""

import pytest

from users_api.services.validation import (
    EMAIL_INVALID,
    EMAIL_REQUIRED,
    NAME_REQUIRED,
    validate_user_data,
)


@pytest.mark.unit
def test_valid_payload_is_trimmed() -> None:
    data = {"name": "  Ann  ", "email": "ann@x.com"}
    result = validate_user_data(data)

    assert result.is_valid
    assert result.errors == []
    assert result.value.name == "Ann"
    assert result.value.email == "ann@x.com"
    assert data == {"name": "  Ann  ", "email": "ann@x.com"}


@pytest.mark.unit
def test_empty_name_and_bad_email_report_both() -> None:
    result = validate_user_data({"name": "", "email": "bad"})

    assert not result.is_valid
    assert result.errors == [NAME_REQUIRED, EMAIL_INVALID]
    assert result.value is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "data",
    [{}, None, [], "text", 42, {"name": None, "email": None}, {"name": 5, "email": True}],
)
def test_missing_or_wrongly_typed_fields(data) -> None:
    result = validate_user_data(data)
    assert result.errors == [NAME_REQUIRED, EMAIL_REQUIRED]


@pytest.mark.unit
def test_whitespace_only_values_are_empty() -> None:
    result = validate_user_data({"name": "   ", "email": " \t "})
    assert result.errors == [NAME_REQUIRED, EMAIL_REQUIRED]


@pytest.mark.unit
@pytest.mark.parametrize("email", ["a@b.c", "first.last@sub.example.org", "x+tag@y.io"])
def test_accepted_emails(email: str) -> None:
    assert validate_user_data({"name": "Ann", "email": email}).is_valid


@pytest.mark.unit
@pytest.mark.parametrize(
    "email",
    ["a@b", "noatsign.com", "a@@b.c", "a b@c.d", "@b.c", "a@.c", "a@b.", "a@b.c\n", " a@b.c"],
)
def test_rejected_emails(email: str) -> None:
    result = validate_user_data({"name": "Ann", "email": email})
    assert result.errors == [EMAIL_INVALID]
