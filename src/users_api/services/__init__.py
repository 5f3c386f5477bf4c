"""Service access and request-level dependencies."""

import json
import logging
import re
from typing import Any

from fastapi import Request, status

from users_api.errors import INVALID_JSON_BODY, INVALID_USER_ID, USER_NOT_FOUND, ApiError
from users_api.services.user_store import UserStore
from users_api.services.validation import ValidationResult, validate_user_data

logger = logging.getLogger(__name__)

_USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def get_user_store(request: Request) -> UserStore:
    """Get the store owned by the running application.

    Args:
        request: Incoming request

    Returns:
        UserStore instance created with the application
    """
    return request.app.state.user_store


def parse_user_id(user_id: str) -> int:
    """Parse a path segment as a base-10 integer.

    Surrounding whitespace is ignored; anything else besides an optional sign
    and ASCII digits is rejected.

    Raises:
        ApiError: 400 if the segment is not an integer, 404 if it has more
            digits than int() converts, since no stored id can be that large
    """
    candidate = user_id.strip()
    if not _USER_ID_PATTERN.fullmatch(candidate):
        logger.info("Rejected malformed user id %r", user_id)
        raise ApiError(status.HTTP_400_BAD_REQUEST, INVALID_USER_ID)
    try:
        return int(candidate)
    except ValueError as e:
        logger.info("User id with %d characters exceeds the integer conversion limit", len(candidate))
        raise ApiError(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND) from e


async def get_json_body(request: Request) -> Any:
    """Parse the request body as JSON.

    Bodies that are empty or not sent as ``application/json`` read as an
    empty object.

    Raises:
        ApiError: 400 if a JSON body cannot be decoded
    """
    media_type = request.headers.get("content-type", "").split(";", 1)[0].strip().lower()
    if media_type != "application/json":
        return {}

    if not (await request.body()).strip():
        return {}

    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Rejected malformed JSON body on %s %s: %s", request.method, request.url.path, e)
        raise ApiError(status.HTTP_400_BAD_REQUEST, INVALID_JSON_BODY) from e


__all__ = [
    "UserStore",
    "ValidationResult",
    "get_json_body",
    "get_user_store",
    "parse_user_id",
    "validate_user_data",
]
