"""User model."""

import uuid

from sqlalchemy import Column, String

from src.database import Base
from src.models.mixins import TimestampMixin


def generate_user_id() -> str:
    """Return a new opaque user identifier."""
    return uuid.uuid4().hex


class User(Base, TimestampMixin):
    """A registered account. The email column carries the uniqueness constraint."""

    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=generate_user_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email}>"
