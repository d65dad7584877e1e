"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from realjobs.domain.model.comment import Comment
from realjobs.domain.value import CommentId, JobId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments are append-only: there is no update or delete.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_job(self, job_id: JobId) -> List[Comment]:
        """Find all comments on a job (flat list, any order).

        Args:
            job_id: The job's ID

        Returns:
            Every comment on the job, roots and replies
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId, limit: int) -> List[Comment]:
        """Find a user's most recent comments across all jobs.

        Args:
            author_id: The comment author
            limit: Maximum number of comments

        Returns:
            Comments, newest first
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count every comment a user has written."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def count_by_jobs(self, job_ids: Sequence[JobId]) -> Dict[JobId, int]:
        """Count comments for several jobs (batch query).

        Args:
            job_ids: Jobs to count

        Returns:
            Comment count per job; jobs without comments map to 0
        """
        pass
