"""HTTP routes for user account management."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from users.application.services import UserService
from users.dependencies import get_user_service
from users.domain.value_objects import InvalidEmailError
from users.ports.exceptions import DuplicateUserEmailError, LastSuperAdminError
from users.presentation.models import (
    CreateUserRequest,
    UpdateUserRequest,
    UpdateUserStatusRequest,
    UserResponse,
)

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


def _user_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="User not found",
    )


@router.get("")
async def list_users(
    service: Annotated[UserService, Depends(get_user_service)],
) -> list[UserResponse]:
    """List all users, most recently logged in first."""
    try:
        users = await service.list_users()
        return [UserResponse.from_domain(user) for user in users]

    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list users",
        ) from e


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Create a user account.

    Raises:
        HTTPException: 400 if the email is malformed
        HTTPException: 409 if the email is already taken
        HTTPException: 500 for unexpected errors
    """
    try:
        user = await service.create_user(
            email=request.email,
            name=request.name,
            role=request.role,
            password=request.password,
        )
        return UserResponse.from_domain(user)

    except InvalidEmailError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except DuplicateUserEmailError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A user with this email already exists",
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create user",
        ) from e


@router.patch("/{user_id}/status")
async def update_user_status(
    user_id: int,
    request: UpdateUserStatusRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Activate or deactivate a user."""
    try:
        user = await service.set_user_status(user_id, request.is_active)
        if user is None:
            raise _user_not_found()
        return UserResponse.from_domain(user)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update user status",
        ) from e


@router.get("/{email}")
async def get_user(
    email: str,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Get user detail by email.

    Raises:
        HTTPException: 404 if the user is not found
        HTTPException: 500 for unexpected errors
    """
    try:
        user = await service.get_user(email)
        if user is None:
            raise _user_not_found()
        return UserResponse.from_domain(user)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve user",
        ) from e


@router.put("/{email}")
async def update_user(
    email: str,
    request: UpdateUserRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Update a user's name, role or password."""
    try:
        user = await service.update_user(
            email,
            name=request.name,
            role=request.role,
            password=request.password,
        )
        if user is None:
            raise _user_not_found()
        return UserResponse.from_domain(user)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update user",
        ) from e


@router.delete(
    "/{email}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        204: {"description": "User deleted"},
        400: {"description": "User is the last super_admin"},
        404: {"description": "User not found"},
        500: {"description": "Internal server error"},
    },
)
async def delete_user(
    email: str,
    service: Annotated[UserService, Depends(get_user_service)],
) -> None:
    """Delete a user account.

    The last remaining super_admin cannot be deleted.
    """
    try:
        deleted = await service.delete_user(email)
    except LastSuperAdminError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete user",
        ) from e

    if not deleted:
        raise _user_not_found()
