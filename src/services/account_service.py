"""Account service for sign-up, sign-in and user CRUD."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.models.user import User
from src.services.auth import TokenIssuer, get_password_hash, verify_password
from src.services.exceptions import (
    BadRequestError,
    ConflictError,
    InternalError,
    InvalidFieldError,
    NotFoundError,
    UnauthorizedError,
)
from src.services.validators import capitalize, is_valid_email, is_valid_name, is_valid_password

logger = logging.getLogger(__name__)

SIGN_UP_FIELDS = ("name", "email", "password")
SIGN_IN_FIELDS = ("email", "password")


def normalize_email(email: str) -> str:
    return email.strip().lower()


def require_fields(data: Mapping[str, Any], fields: Iterable[str]) -> None:
    """Raise BadRequestError if any of ``fields`` is absent or empty."""
    if any(not data.get(field) for field in fields):
        raise BadRequestError()


def prepare_user_fields(fields: Mapping[str, str]) -> dict[str, str]:
    """Normalize and validate user fields ahead of persistence.

    Only the keys present in ``fields`` are processed, so a partial patch goes
    through the same steps as a new account:

    - ``name`` must have at least 3 characters and is capitalized per word
    - ``email`` is lowercased and must look like an address
    - ``password`` must pass the password rule and is replaced by ``password_hash``

    Raises:
        InvalidFieldError: naming the first field that fails its rule.
    """
    prepared: dict[str, str] = {}

    if "name" in fields:
        if not is_valid_name(fields["name"]):
            raise InvalidFieldError("Invalid name format")
        prepared["name"] = capitalize(fields["name"])

    if "email" in fields:
        email = normalize_email(fields["email"])
        if not is_valid_email(email):
            raise InvalidFieldError("Invalid email format")
        prepared["email"] = email

    if "password" in fields:
        if not is_valid_password(fields["password"]):
            raise InvalidFieldError("Invalid password format")
        try:
            prepared["password_hash"] = get_password_hash(fields["password"])
        except ValueError:
            raise InvalidFieldError("Invalid password format") from None

    return prepared


class AccountService:
    """Service for account-related operations."""

    def __init__(self, db: Session, token_issuer: TokenIssuer):
        self.db = db
        self.token_issuer = token_issuer

    @contextmanager
    def _store_errors(self) -> Iterator[None]:
        """Translate store failures into account errors, rolling back the session."""
        try:
            yield
        except IntegrityError:
            self.db.rollback()
            raise ConflictError() from None
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("User store operation failed")
            raise InternalError() from None

    def sign_up(self, data: Mapping[str, Any]) -> str:
        """Register a new account and return an access token for it."""
        user = self.create_user(data)
        return self.token_issuer.issue(user.id)

    def sign_in(self, data: Mapping[str, Any]) -> str:
        """Check credentials and return an access token.

        Unknown email and wrong password raise the same UnauthorizedError.
        """
        require_fields(data, SIGN_IN_FIELDS)
        email = normalize_email(data["email"])

        with self._store_errors():
            user = self.db.query(User).filter(User.email == email).first()

        if user is None or not verify_password(data["password"], user.password_hash):
            logger.warning("Failed sign-in attempt")
            raise UnauthorizedError()

        logger.info(f"User {user.id} signed in")
        return self.token_issuer.issue(user.id)

    def create_user(self, data: Mapping[str, Any]) -> User:
        require_fields(data, SIGN_UP_FIELDS)
        user = User(**prepare_user_fields({field: data[field] for field in SIGN_UP_FIELDS}))

        with self._store_errors():
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)

        logger.info(f"Created user {user.id}")
        return user

    def get_user(self, user_id: str) -> User:
        with self._store_errors():
            user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise NotFoundError()
        return user

    def list_users(self) -> list[User]:
        with self._store_errors():
            return self.db.query(User).order_by(User.created_at, User.id).all()

    def update_user(self, user_id: str, patch: Mapping[str, Any]) -> User:
        """Apply a partial update and return the user as stored afterwards.

        A ``password`` in the patch is validated and hashed like on creation.
        """
        user = self.get_user(user_id)
        changes = prepare_user_fields(
            {field: patch[field] for field in SIGN_UP_FIELDS if patch.get(field) is not None}
        )

        with self._store_errors():
            for field, value in changes.items():
                setattr(user, field, value)
            self.db.commit()
            self.db.refresh(user)

        if changes:
            logger.info(f"Updated user {user.id}: {', '.join(sorted(changes))}")
        return user

    def delete_user(self, user_id: str) -> None:
        user = self.get_user(user_id)
        with self._store_errors():
            self.db.delete(user)
            self.db.commit()
        logger.info(f"Deleted user {user_id}")
