"""Bookmark domain service."""

import logfire

from realjobs.domain.error import NotFoundError
from realjobs.domain.model.bookmark import Bookmark
from realjobs.domain.repository import BookmarkRepository, JobRepository
from realjobs.domain.value import JobId, UserId

from .base import Service


class BookmarkService(Service):
    """Domain service for saved jobs."""

    def __init__(
        self,
        bookmark_repository: BookmarkRepository,
        job_repository: JobRepository,
    ) -> None:
        """Initialize bookmark service.

        Args:
            bookmark_repository: Bookmark repository
            job_repository: Job repository
        """
        self.bookmark_repository = bookmark_repository
        self.job_repository = job_repository

    async def toggle(self, user_id: UserId, job_id: JobId) -> bool:
        """Bookmark a job, or remove the bookmark if it exists.

        Args:
            user_id: User ID
            job_id: Job ID

        Returns:
            True if the job is bookmarked afterwards

        Raises:
            NotFoundError: If the job does not exist
        """
        with logfire.span(
            "bookmark_service.toggle", job_id=str(job_id), user_id=str(user_id)
        ):
            if not await self.job_repository.find_by_id(job_id):
                raise NotFoundError("Job", str(job_id))

            if await self.bookmark_repository.remove(user_id, job_id):
                logfire.info("Bookmark removed", job_id=str(job_id))
                return False

            await self.bookmark_repository.add(Bookmark(user_id=user_id, job_id=job_id))
            logfire.info("Bookmark added", job_id=str(job_id))
            return True

    async def is_bookmarked(self, user_id: UserId, job_id: JobId) -> bool:
        """Whether the user has saved the job."""
        return await self.bookmark_repository.exists(user_id, job_id)

    async def get_bookmarks(self, user_id: UserId) -> list[Bookmark]:
        """The user's bookmarks, most recent first."""
        with logfire.span("bookmark_service.get_bookmarks", user_id=str(user_id)):
            return await self.bookmark_repository.find_by_user(user_id)
