"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.models.user import User
from src.services.account_service import AccountService
from src.services.auth import TokenIssuer, get_token_issuer
from src.services.exceptions import NotFoundError, UnauthorizedError

security = HTTPBearer(auto_error=False)


def get_account_service(
    db: Annotated[Session, Depends(get_db)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AccountService:
    """Get account service with dependencies."""
    return AccountService(db, token_issuer)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
    account_service: Annotated[AccountService, Depends(get_account_service)],
) -> User:
    """Get the current authenticated user from the bearer token."""
    if credentials is None:
        raise UnauthorizedError("Not authenticated")

    payload = token_issuer.decode(credentials.credentials)
    user_id = payload.get("sub") if payload else None
    if user_id is None:
        raise UnauthorizedError("Invalid authentication credentials")

    try:
        return account_service.get_user(user_id)
    except NotFoundError:
        raise UnauthorizedError("User not found") from None
