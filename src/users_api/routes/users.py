"""User API routes."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Response, status

from users_api.errors import USER_NOT_FOUND, VALIDATION_FAILED, ApiError
from users_api.models.user import ErrorResponse, User
from users_api.services import get_json_body, get_user_store, parse_user_id
from users_api.services.user_store import UserStore
from users_api.services.validation import ValidationResult, validate_user_data

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


def _require_valid(data: Any) -> ValidationResult:
    result = validate_user_data(data)
    if not result.is_valid:
        logger.info("Validation failed: %s", result.errors)
        raise ApiError(status.HTTP_400_BAD_REQUEST, VALIDATION_FAILED, details=result.errors)
    return result


def _not_found(user_id: int) -> ApiError:
    logger.info("User %s not found", user_id)
    return ApiError(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)


@router.get("", response_model=list[User])
def list_users(store: UserStore = Depends(get_user_store)) -> list[User]:
    return store.list()


@router.get("/{user_id}", response_model=User, responses=_ERRORS)
def get_user(user_id: str, store: UserStore = Depends(get_user_store)) -> User:
    parsed_id = parse_user_id(user_id)
    user = store.get(parsed_id)
    if user is None:
        raise _not_found(parsed_id)
    return user


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED, responses=_ERRORS)
def create_user(body: Any = Depends(get_json_body), store: UserStore = Depends(get_user_store)) -> User:
    user_input = _require_valid(body).value
    return store.create(user_input.name, user_input.email)


@router.put("/{user_id}", response_model=User, responses=_ERRORS)
def update_user(
    user_id: str,
    body: Any = Depends(get_json_body),
    store: UserStore = Depends(get_user_store),
) -> User:
    """Replace name and email of a user, keeping its id and creation time.

    The id is checked before existence, and existence before the body, so a
    request for a missing user reports 404 even when the body is invalid.
    """
    parsed_id = parse_user_id(user_id)
    if store.get(parsed_id) is None:
        raise _not_found(parsed_id)

    user_input = _require_valid(body).value
    updated = store.update(parsed_id, user_input.name, user_input.email)
    if updated is None:
        # Removed between the existence check and the write
        raise _not_found(parsed_id)
    return updated


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response, responses=_ERRORS)
def delete_user(user_id: str, store: UserStore = Depends(get_user_store)) -> Response:
    parsed_id = parse_user_id(user_id)
    if not store.remove(parsed_id):
        raise _not_found(parsed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
