"""Authentication domain service.

Sign-in happens with the external auth provider. This service only turns a
provider-issued token into the current user.
"""

from uuid import UUID

import logfire

from realjobs.config import AuthSettings
from realjobs.domain.model.user import CurrentUser
from realjobs.domain.value import UserId
from realjobs.util.jwt import JWTError, verify_token

from .base import Service


class AuthService(Service):
    """Domain service for token verification."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize auth service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def get_current_user(self, token: str | None) -> CurrentUser | None:
        """Resolve the user behind a token.

        Args:
            token: JWT from the auth cookie or bearer header

        Returns:
            The user, or None for a missing, expired or invalid token
        """
        if not token:
            return None

        with logfire.span("auth_service.get_current_user"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Token verification failed", error=str(e))
                return None

            try:
                user_id = UserId(UUID(payload.sub))
            except ValueError:
                logfire.warn("Token subject is not a user ID", sub=payload.sub)
                return None

            return CurrentUser(id=user_id, email=payload.email)
