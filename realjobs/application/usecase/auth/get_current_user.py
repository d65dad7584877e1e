"""Get current user use case."""

from pydantic import BaseModel

from realjobs.application.usecase.base import BaseUseCase
from realjobs.domain.service import AuthService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None = None  # JWT from cookie or bearer header


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    email: str | None


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for resolving the authenticated user from a token."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize get current user use case.

        Args:
            auth_service: Auth domain service
        """
        self.auth_service = auth_service

    async def execute(
        self, request: GetCurrentUserRequest
    ) -> GetCurrentUserResponse | None:
        """Execute get current user flow.

        Args:
            request: Request with the raw token, if any

        Returns:
            The user, or None when the request is anonymous or the token
            is invalid
        """
        user = self.auth_service.get_current_user(request.token)
        if user is None:
            return None
        return GetCurrentUserResponse(user_id=str(user.id), email=user.email)
