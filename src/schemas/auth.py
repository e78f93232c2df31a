"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserRegister(BaseModel):
    """User registration request.

    Fields are optional here so that absent ones are reported by the account
    service as a bad request rather than a schema error.
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None


class UserLogin(BaseModel):
    """User login request."""

    email: str | None = None
    password: str | None = None


class Token(BaseModel):
    """JWT token response, serialized as ``{"accessToken": ...}``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    access_token: str
