"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import Token, UserLogin, UserRegister
from src.schemas.user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "Token",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
]
