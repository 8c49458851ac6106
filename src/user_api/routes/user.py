"""User API routes."""

from fastapi import APIRouter, Depends, Query, status

from user_api.models.error import ErrorResponse
from user_api.services import get_user_directory
from user_common.models.user import User, UserPatch
from user_common.services.user_directory import UserDirectory

router = APIRouter(prefix="/users", tags=["users"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "User not found"}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid request"}}


@router.get("", response_model=list[User])
async def list_users(
    sorted_by: str | None = Query(
        default=None,
        alias="sortedBy",
        description="Attribute to sort the users by, ascending",
    ),
    directory: UserDirectory = Depends(get_user_directory),
) -> list[User]:
    """List users in creation order, or sorted by one attribute."""
    return directory.list_users(sorted_by)


@router.get("/{user_id}", response_model=User, responses={**_NOT_FOUND, **_BAD_REQUEST})
async def get_user(user_id: str, directory: UserDirectory = Depends(get_user_directory)) -> User:
    return directory.get_user(user_id)


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": ErrorResponse,
            "description": "A phone number is already in use, or the body is malformed",
        }
    },
)
async def create_user(user: User, directory: UserDirectory = Depends(get_user_directory)) -> User:
    """Store a new user. Every phone number must be unused across the directory."""
    return directory.create_user(user)


@router.patch("/{user_id}", response_model=User, responses={**_NOT_FOUND, **_BAD_REQUEST})
async def update_user(
    user_id: str,
    patch: UserPatch,
    directory: UserDirectory = Depends(get_user_directory),
) -> User:
    """Overwrite the given fields of a user; other fields are kept."""
    return directory.update_user(user_id, patch)


@router.delete("/{user_id}", response_model=User, responses={**_NOT_FOUND, **_BAD_REQUEST})
async def delete_user(user_id: str, directory: UserDirectory = Depends(get_user_directory)) -> User:
    """Delete a user and return the removed record."""
    return directory.delete_user(user_id)
