"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserCreate(BaseModel):
    """Create a new user."""

    name: str | None = None
    email: str | None = None
    password: str | None = None


class UserUpdate(BaseModel):
    """Partial update of a user. Unknown keys are ignored."""

    name: str | None = None
    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """User response. The password hash is never part of it."""

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
