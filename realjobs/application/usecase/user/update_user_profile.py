"""Update user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from realjobs.application.usecase.base import BaseUseCase, require_user
from realjobs.domain.service import ProfileService
from realjobs.domain.value import UserId


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    username: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    user_id: str | None = None  # User ID from authenticated user
    user_email: str | None = None


class UpdateUserProfileResponse(BaseModel):
    """Update user profile response."""

    user_id: str
    username: str
    avatar_url: str | None
    bio: str | None
    karma_points: int
    updated_at: datetime


class UpdateUserProfileUseCase(BaseUseCase):
    """Use case for editing one's own profile.

    Username, bio and avatar can be changed. Karma cannot.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update user profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update user profile flow.

        Raises:
            UnauthorizedError: If not authenticated
            ValidationError: If a field is invalid or the username is taken
        """
        user_id = require_user(
            UserId(UUID(request.user_id)) if request.user_id else None,
            "edit your profile",
        )

        profile = await self.profile_service.update_profile(
            user_id,
            email=request.user_email,
            username=request.username,
            bio=request.bio,
            avatar_url=request.avatar_url,
        )

        return UpdateUserProfileResponse(
            user_id=str(profile.id),
            username=profile.username,
            avatar_url=profile.avatar_url,
            bio=profile.bio,
            karma_points=profile.karma_points,
            updated_at=profile.updated_at,
        )
