"""Request authentication helpers."""

from fastapi import Cookie, Header

from realjobs.domain.service import AuthService


def get_auth_token(
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> str | None:
    """Extract the JWT from the ``auth_token`` cookie or a bearer header.

    The cookie wins when both are present.
    """
    if auth_token:
        return auth_token
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            return credentials.strip()
    return None


def current_user_id(auth_service: AuthService, token: str | None) -> str | None:
    """Resolve the user ID for a request, or None when anonymous."""
    user = auth_service.get_current_user(token)
    return str(user.id) if user else None


def current_user_fields(auth_service: AuthService, token: str | None) -> dict:
    """Request fields naming the current user: ``user_id`` and ``user_email``."""
    user = auth_service.get_current_user(token)
    if not user:
        return {"user_id": None, "user_email": None}
    return {"user_id": str(user.id), "user_email": user.email}
