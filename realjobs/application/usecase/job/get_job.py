"""Get job use case."""

from uuid import UUID

from pydantic import BaseModel

from realjobs.application.usecase.base import BaseUseCase
from realjobs.domain.model.common import utcnow
from realjobs.domain.service import (
    BookmarkService,
    JobService,
    RankingService,
    VoteService,
)
from realjobs.domain.value import JobId, UserId

from .list_jobs import JobListItem


class GetJobRequest(BaseModel):
    """Get job request."""

    job_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetJobResponse(BaseModel):
    """Get job response."""

    job: JobListItem
    owner_id: str
    is_owner: bool
    is_bookmarked: bool


class GetJobUseCase(BaseUseCase):
    """Use case for the job detail view."""

    def __init__(
        self,
        job_service: JobService,
        ranking_service: RankingService,
        vote_service: VoteService,
        bookmark_service: BookmarkService,
    ) -> None:
        """Initialize get job use case.

        Args:
            job_service: Job domain service
            ranking_service: Ranking service for counts and badge
            vote_service: Vote service for the user's vote
            bookmark_service: Bookmark service for the user's saved state
        """
        self.job_service = job_service
        self.ranking_service = ranking_service
        self.vote_service = vote_service
        self.bookmark_service = bookmark_service

    async def execute(self, request: GetJobRequest) -> GetJobResponse:
        """Execute get job flow.

        Args:
            request: Job ID and optional current user

        Returns:
            Job detail with trust score, badge, color, vote and bookmark state

        Raises:
            NotFoundError: If the job does not exist
        """
        job = await self.job_service.get_job(JobId(UUID(request.job_id)))
        [ranked] = await self.ranking_service.annotate([job], utcnow())

        user_vote = None
        is_bookmarked = False
        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        if user_id:
            user_vote = await self.vote_service.get_user_vote(user_id, job.id)
            is_bookmarked = await self.bookmark_service.is_bookmarked(user_id, job.id)

        return GetJobResponse(
            job=JobListItem.from_ranked(ranked, user_vote),
            owner_id=str(job.owner_id),
            is_owner=user_id == job.owner_id,
            is_bookmarked=is_bookmarked,
        )
