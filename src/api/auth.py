"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_account_service, get_current_user
from src.models.user import User
from src.schemas.auth import Token, UserLogin, UserRegister
from src.schemas.user import UserResponse
from src.services.account_service import AccountService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=Token)
def register(
    user_data: UserRegister,
    account_service: Annotated[AccountService, Depends(get_account_service)],
):
    """Register a new user and return an access token."""
    access_token = account_service.sign_up(user_data.model_dump())
    return Token(access_token=access_token)


@router.post("/login", response_model=Token)
def login(
    credentials: UserLogin,
    account_service: Annotated[AccountService, Depends(get_account_service)],
):
    """Login with email and password."""
    access_token = account_service.sign_in(credentials.model_dump())
    return Token(access_token=access_token)


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user
