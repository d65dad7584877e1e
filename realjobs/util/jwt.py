"""JWT token utilities.

Tokens are minted by the external auth provider; the ``sub`` claim carries
the user ID. ``create_token`` exists for local tooling and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from realjobs.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str
    email: str | None = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    email: str | None,
    settings: AuthSettings,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Create a JWT token shaped like the auth provider's.

    Args:
        user_id: User ID (``sub`` claim)
        email: User email
        settings: Authentication settings
        expires_in: Token lifetime

    Returns:
        Encoded JWT token
    """
    payload: dict = {
        "sub": user_id,
        "email": email,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    if settings.jwt_audience:
        payload["aud"] = settings.jwt_audience

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"verify_aud": settings.jwt_audience is not None},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
