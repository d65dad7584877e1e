"""List jobs use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from realjobs.application.usecase.base import BaseUseCase
from realjobs.domain.service import RankedJob, RankingService, VoteService
from realjobs.domain.value import (
    Badge,
    BadgeColor,
    JobFilters,
    JobStatus,
    JobType,
    RankingMode,
    UserId,
    VoteType,
)


class JobListItem(BaseModel):
    """Job with its ranking annotations."""

    job_id: str
    url: str
    title: str
    company: str
    description: str | None
    category: str | None
    location: str | None
    job_type: JobType
    status: JobStatus
    trust_score: int
    vote_count: int
    upvote_count: int
    downvote_count: int
    comment_count: int
    badge: Badge | None
    badge_color: BadgeColor
    created_at: datetime
    user_vote: VoteType | None = None

    @classmethod
    def from_ranked(
        cls, item: RankedJob, user_vote: VoteType | None = None
    ) -> "JobListItem":
        """Convert an annotated domain job to the response model."""
        job = item.job
        return cls(
            job_id=str(job.id),
            url=job.url,
            title=job.title,
            company=job.company,
            description=job.description,
            category=job.category,
            location=job.location,
            job_type=job.job_type,
            status=job.status,
            trust_score=job.trust_score,
            vote_count=item.vote_count,
            upvote_count=item.upvote_count,
            downvote_count=item.downvote_count,
            comment_count=item.comment_count,
            badge=item.badge,
            badge_color=item.badge_color,
            created_at=job.created_at,
            user_vote=user_vote,
        )


class ListJobsRequest(BaseModel):
    """List jobs request."""

    sort: RankingMode = RankingMode.HOT
    search: str | None = Field(default=None, max_length=200)
    category: str | None = None
    location: str | None = Field(default=None, max_length=100)
    job_type: JobType | None = None
    min_trust_score: int | None = None
    page: int = Field(default=0, ge=0)
    user_id: str | None = None  # Current user ID (if authenticated)


class ListJobsResponse(BaseModel):
    """List jobs response."""

    jobs: list[JobListItem]
    sort: RankingMode
    page: int
    page_size: int
    has_more: bool


class ListJobsUseCase(BaseUseCase):
    """Use case for ranking and filtering the job list."""

    def __init__(
        self, ranking_service: RankingService, vote_service: VoteService
    ) -> None:
        """Initialize list jobs use case.

        Args:
            ranking_service: Ranking domain service
            vote_service: Vote service for the user's own votes
        """
        self.ranking_service = ranking_service
        self.vote_service = vote_service

    async def execute(self, request: ListJobsRequest) -> ListJobsResponse:
        """Execute list jobs flow.

        Args:
            request: Sort mode, filters and page

        Returns:
            One page of jobs with counts, badges and the user's votes
        """
        with logfire.span(
            "list_jobs.execute", sort=request.sort.value, page=request.page
        ):
            filters = JobFilters(
                search=request.search,
                category=request.category,
                location=request.location,
                job_type=request.job_type,
                min_trust_score=request.min_trust_score,
            )
            result = await self.ranking_service.rank_jobs(
                request.sort, filters, page=request.page
            )

            user_votes: dict = {}
            if request.user_id and result.items:
                user_votes = await self.vote_service.get_user_votes_for_jobs(
                    UserId(UUID(request.user_id)),
                    [item.job.id for item in result.items],
                )

            return ListJobsResponse(
                jobs=[
                    JobListItem.from_ranked(item, user_votes.get(item.job.id))
                    for item in result.items
                ],
                sort=request.sort,
                page=result.page,
                page_size=result.page_size,
                has_more=result.has_more,
            )
