"""User account API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from taskboard.api.dependencies import get_current_user, get_user_service
from taskboard.models.user import User
from taskboard.schemas.auth import UserRegister, UserResponse
from taskboard.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserRegister,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Sign up without issuing a token."""
    return users.create(user_data.email, user_data.password, user_data.name)


@router.get("", response_model=list[UserResponse])
def get_users(
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get all users."""
    return users.list_all()


@router.get("/me", response_model=UserResponse)
def get_profile(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the caller's profile."""
    return current_user


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get a user by id."""
    return users.get(user_id)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Delete the caller's own account."""
    users.delete(user_id, current_user.id)
