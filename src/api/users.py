"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_account_service
from src.schemas.user import UserCreate, UserResponse, UserUpdate
from src.services.account_service import AccountService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    account_service: Annotated[AccountService, Depends(get_account_service)],
):
    """Create a new user."""
    return account_service.create_user(user_data.model_dump())


@router.get("", response_model=list[UserResponse])
def list_users(
    account_service: Annotated[AccountService, Depends(get_account_service)],
):
    """Get all users."""
    return account_service.list_users()


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    account_service: Annotated[AccountService, Depends(get_account_service)],
):
    """Get a user by id."""
    return account_service.get_user(user_id)


@router.put("/{user_id}", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def update_user(
    user_id: str,
    user_data: UserUpdate,
    account_service: Annotated[AccountService, Depends(get_account_service)],
):
    """Update a user with the fields present in the body."""
    return account_service.update_user(user_id, user_data.model_dump(exclude_unset=True))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: str,
    account_service: Annotated[AccountService, Depends(get_account_service)],
):
    """Delete a user."""
    account_service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
