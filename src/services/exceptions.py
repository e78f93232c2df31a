"""Errors raised by the account service and mapped to HTTP statuses by the API."""

from fastapi import status


class AccountError(Exception):
    """Base class for account-related errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(AccountError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing fields"


class InvalidFieldError(AccountError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_message = "Invalid user data"


class ConflictError(AccountError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Email already registered"


class UnauthorizedError(AccountError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication failed. Invalid email or password."


class NotFoundError(AccountError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "User not found"


class InternalError(AccountError):
    """Unexpected store or runtime failure. The message never carries details."""
