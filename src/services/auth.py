"""Authentication service for JWT and password handling."""

from datetime import UTC, datetime, timedelta
from functools import lru_cache

from jose import JWTError, jwt
from passlib.context import CryptContext

from src.config import Settings, get_settings

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    A malformed or unrecognized hash counts as a mismatch.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


class TokenIssuer:
    """Signs and decodes bearer tokens with a fixed secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expiration_minutes: int | None = None,
    ):
        if not secret:
            raise ValueError("A signing secret is required to issue access tokens")
        self._secret = secret
        self.algorithm = algorithm
        self.expiration_minutes = expiration_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expiration_minutes=settings.jwt_expiration_minutes,
        )

    def issue(self, user_id: str) -> str:
        """Create an access token whose subject is ``user_id``.

        An ``exp`` claim is only added when an expiration is configured.
        """
        to_encode: dict = {"sub": str(user_id)}
        if self.expiration_minutes is not None:
            to_encode["exp"] = datetime.now(UTC) + timedelta(minutes=self.expiration_minutes)
        return jwt.encode(to_encode, self._secret, algorithm=self.algorithm)

    def decode(self, token: str) -> dict | None:
        """Decode and validate a token, returning None when it is not acceptable."""
        try:
            return jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except JWTError:
            return None


@lru_cache
def get_token_issuer() -> TokenIssuer:
    """Get the process-wide token issuer built from settings."""
    return TokenIssuer.from_settings(get_settings())
