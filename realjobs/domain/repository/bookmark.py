"""Bookmark repository interface."""

from abc import ABC, abstractmethod
from typing import List

from realjobs.domain.model.bookmark import Bookmark
from realjobs.domain.value import JobId, UserId


class BookmarkRepository(ABC):
    """Repository for a user's saved jobs."""

    @abstractmethod
    async def exists(self, user_id: UserId, job_id: JobId) -> bool:
        """Check whether the user has bookmarked the job."""
        pass

    @abstractmethod
    async def add(self, bookmark: Bookmark) -> bool:
        """Add a bookmark unless it already exists.

        Returns:
            True if a new bookmark was stored
        """
        pass

    @abstractmethod
    async def remove(self, user_id: UserId, job_id: JobId) -> bool:
        """Remove a bookmark.

        Returns:
            True if a bookmark was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Bookmark]:
        """Find a user's bookmarks, most recent first."""
        pass
