"""Toggle bookmark use case."""

from uuid import UUID

from pydantic import BaseModel

from realjobs.application.usecase.base import BaseUseCase, require_user
from realjobs.domain.service import BookmarkService
from realjobs.domain.value import JobId, UserId


class ToggleBookmarkRequest(BaseModel):
    """Toggle bookmark request."""

    job_id: str  # UUID string
    user_id: str | None = None  # User ID from authenticated user


class ToggleBookmarkResponse(BaseModel):
    """Toggle bookmark response."""

    job_id: str
    bookmarked: bool


class ToggleBookmarkUseCase(BaseUseCase):
    """Use case for saving or unsaving a job."""

    def __init__(self, bookmark_service: BookmarkService) -> None:
        """Initialize toggle bookmark use case.

        Args:
            bookmark_service: Bookmark domain service
        """
        self.bookmark_service = bookmark_service

    async def execute(self, request: ToggleBookmarkRequest) -> ToggleBookmarkResponse:
        """Execute toggle bookmark flow.

        Raises:
            UnauthorizedError: If not authenticated
            NotFoundError: If the job does not exist
        """
        user_id = require_user(
            UserId(UUID(request.user_id)) if request.user_id else None,
            "bookmark jobs",
        )
        bookmarked = await self.bookmark_service.toggle(
            user_id, JobId(UUID(request.job_id))
        )
        return ToggleBookmarkResponse(job_id=request.job_id, bookmarked=bookmarked)
