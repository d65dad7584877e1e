"""Get user profile use case."""

from datetime import datetime

from pydantic import BaseModel

from realjobs.application.usecase.base import BaseUseCase
from realjobs.application.usecase.job.list_jobs import JobListItem
from realjobs.domain.service import ProfileService
from realjobs.domain.value import Sentiment


class ProfileComment(BaseModel):
    """Recent comment shown on a profile."""

    comment_id: str
    job_id: str
    job_title: str | None
    content: str
    sentiment: Sentiment
    created_at: datetime


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    username: str


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user_id: str
    username: str
    avatar_url: str | None
    bio: str | None
    karma_points: int
    created_at: datetime
    total_jobs: int
    total_comments: int
    postings: list[JobListItem]
    recent_comments: list[ProfileComment]


class GetUserProfileUseCase(BaseUseCase):
    """Use case for the public profile page.

    Anyone can view a profile, signed in or not.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get user profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If no user has this username
        """
        profile = await self.profile_service.get_profile(request.username)
        activity = await self.profile_service.get_activity(profile)

        return GetUserProfileResponse(
            user_id=str(profile.id),
            username=profile.username,
            avatar_url=profile.avatar_url,
            bio=profile.bio,
            karma_points=profile.karma_points,
            created_at=profile.created_at,
            total_jobs=activity.total_jobs,
            total_comments=activity.total_comments,
            postings=[JobListItem.from_ranked(item) for item in activity.postings],
            recent_comments=[
                ProfileComment(
                    comment_id=str(c.id),
                    job_id=str(c.job_id),
                    job_title=activity.job_titles.get(c.job_id),
                    content=c.content,
                    sentiment=c.sentiment,
                    created_at=c.created_at,
                )
                for c in activity.recent_comments
            ],
        )
