"""In-memory bookmark repository for testing."""

from realjobs.domain.model.bookmark import Bookmark
from realjobs.domain.repository.bookmark import BookmarkRepository
from realjobs.domain.value import JobId, UserId


class InMemoryBookmarkRepository(BookmarkRepository):
    """In-memory implementation of BookmarkRepository for testing."""

    def __init__(self) -> None:
        self.bookmarks: dict[tuple[UserId, JobId], Bookmark] = {}

    async def exists(self, user_id: UserId, job_id: JobId) -> bool:
        """Check whether the user has bookmarked the job."""
        return (user_id, job_id) in self.bookmarks

    async def add(self, bookmark: Bookmark) -> bool:
        """Add a bookmark unless it already exists."""
        key = (bookmark.user_id, bookmark.job_id)
        if key in self.bookmarks:
            return False
        self.bookmarks[key] = bookmark
        return True

    async def remove(self, user_id: UserId, job_id: JobId) -> bool:
        """Remove a bookmark."""
        return self.bookmarks.pop((user_id, job_id), None) is not None

    async def find_by_user(self, user_id: UserId) -> list[Bookmark]:
        """Find a user's bookmarks, most recent first."""
        found = [b for b in self.bookmarks.values() if b.user_id == user_id]
        return sorted(found, key=lambda b: b.created_at, reverse=True)
