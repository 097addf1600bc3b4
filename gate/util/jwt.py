"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from gate.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    key: str
    exp: datetime


class InvalidTokenError(Exception):
    """Raised when a token fails signature, expiry or shape checks."""

    pass


def expiration_in_seconds(expiration_in_ms: int) -> int:
    """Convert a millisecond TTL to whole seconds, truncating.

    Tokens issued by earlier releases used the same truncation, so 1500 ms
    yields a 1 second lifetime, never 2.
    """
    return expiration_in_ms // 1000


def create_token(key: str, expiration_in_ms: int, settings: AuthSettings) -> str:
    """Create a signed JWT carrying ``key``.

    Args:
        key: Value stored in the ``key`` claim (an account ID)
        expiration_in_ms: Token lifetime in milliseconds
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    issued_at = datetime.now(timezone.utc)
    expiry = issued_at + timedelta(seconds=expiration_in_seconds(expiration_in_ms))

    payload = {
        "key": key,
        "iat": issued_at,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        InvalidTokenError: If token is invalid, expired or has no key claim
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise InvalidTokenError("Token has expired")
    except jwt.InvalidTokenError:
        raise InvalidTokenError("Invalid token")

    key = payload.get("key")
    if not isinstance(key, str) or not key:
        raise InvalidTokenError("Token has no key claim")

    return TokenPayload(key=key, exp=payload["exp"])
