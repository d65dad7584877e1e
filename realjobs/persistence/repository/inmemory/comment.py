"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from realjobs.domain.model.comment import Comment
from realjobs.domain.repository.comment import CommentRepository
from realjobs.domain.value import CommentId, JobId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self.comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self.comments.get(comment_id)

    async def find_by_job(self, job_id: JobId) -> list[Comment]:
        """Find all comments on a job."""
        return [c for c in self.comments.values() if c.job_id == job_id]

    async def find_by_author(self, author_id: UserId, limit: int) -> list[Comment]:
        """Find a user's most recent comments."""
        found = [c for c in self.comments.values() if c.author_id == author_id]
        found.sort(key=lambda c: str(c.id))
        found.sort(key=lambda c: c.created_at, reverse=True)
        return found[:limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's comments."""
        return sum(1 for c in self.comments.values() if c.author_id == author_id)

    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        self.comments[comment.id] = comment
        return comment

    async def count_by_jobs(self, job_ids: Sequence[JobId]) -> dict[JobId, int]:
        """Count comments for several jobs."""
        counts = {jid: 0 for jid in job_ids}
        for comment in self.comments.values():
            if comment.job_id in counts:
                counts[comment.job_id] += 1
        return counts
