"""List bookmarks use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from realjobs.application.usecase.base import BaseUseCase, require_user
from realjobs.application.usecase.job.list_jobs import JobListItem
from realjobs.domain.model.common import utcnow
from realjobs.domain.service import BookmarkService, JobService, RankingService
from realjobs.domain.value import UserId


class BookmarkItem(BaseModel):
    """Saved job in response."""

    job: JobListItem
    bookmarked_at: datetime


class ListBookmarksRequest(BaseModel):
    """List bookmarks request."""

    user_id: str | None = None  # User ID from authenticated user


class ListBookmarksResponse(BaseModel):
    """List bookmarks response."""

    bookmarks: list[BookmarkItem]
    total: int


class ListBookmarksUseCase(BaseUseCase):
    """Use case for listing the current user's saved jobs."""

    def __init__(
        self,
        bookmark_service: BookmarkService,
        job_service: JobService,
        ranking_service: RankingService,
    ) -> None:
        """Initialize list bookmarks use case.

        Args:
            bookmark_service: Bookmark domain service
            job_service: Job domain service
            ranking_service: Ranking service for counts and badges
        """
        self.bookmark_service = bookmark_service
        self.job_service = job_service
        self.ranking_service = ranking_service

    async def execute(self, request: ListBookmarksRequest) -> ListBookmarksResponse:
        """Execute list bookmarks flow.

        Saved jobs are returned whatever their status, most recently
        saved first.

        Raises:
            UnauthorizedError: If not authenticated
        """
        user_id = require_user(
            UserId(UUID(request.user_id)) if request.user_id else None,
            "view bookmarks",
        )

        bookmarks = await self.bookmark_service.get_bookmarks(user_id)
        jobs = await self.job_service.get_jobs_by_ids([b.job_id for b in bookmarks])
        ranked = {
            item.job.id: item
            for item in await self.ranking_service.annotate(jobs, utcnow())
        }

        items = [
            BookmarkItem(
                job=JobListItem.from_ranked(ranked[b.job_id]),
                bookmarked_at=b.created_at,
            )
            for b in bookmarks
            if b.job_id in ranked
        ]
        return ListBookmarksResponse(bookmarks=items, total=len(items))
