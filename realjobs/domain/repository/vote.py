"""Vote repository interfaces.

Both ledgers share the same contract: at most one row per (user, target),
written with single-statement upserts so concurrent requests never create
duplicates.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from realjobs.domain.model.vote import CommentVote, Vote, VoteTally
from realjobs.domain.value import CommentId, CommentVoteType, JobId, UserId, VoteType


class VoteRepository(ABC):
    """Repository for legitimacy votes on job postings."""

    @abstractmethod
    async def find_by_user_and_job(
        self, user_id: UserId, job_id: JobId
    ) -> Optional[Vote]:
        """Find a user's vote on a job.

        Args:
            user_id: The user's ID
            job_id: The job's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_jobs(
        self, user_id: UserId, job_ids: Sequence[JobId]
    ) -> List[Vote]:
        """Find a user's votes on multiple jobs (batch query).

        Args:
            user_id: The user's ID
            job_ids: Jobs to check

        Returns:
            Votes by the user on the specified jobs
        """
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote, or overwrite the type of the existing one.

        Atomic: the (user_id, job_id) pair never holds two rows.

        Args:
            vote: The vote to write

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def delete_matching(
        self, user_id: UserId, job_id: JobId, vote_type: VoteType
    ) -> None:
        """Delete the user's vote only if it still has the expected type.

        Args:
            user_id: The user's ID
            job_id: The job's ID
            vote_type: Type the caller read before deciding to remove it

        Raises:
            ConflictRetryableError: If no row matched (changed concurrently)
        """
        pass

    @abstractmethod
    async def insert_if_absent(self, vote: Vote) -> bool:
        """Insert a vote unless the user already voted on the job.

        Never modifies an existing vote.

        Args:
            vote: The vote to insert

        Returns:
            True if the vote was inserted
        """
        pass

    @abstractmethod
    async def tally(self, job_id: JobId) -> VoteTally:
        """Count up and down votes on a job.

        Args:
            job_id: The job's ID

        Returns:
            Up votes as positive, down votes as negative
        """
        pass

    @abstractmethod
    async def tally_many(self, job_ids: Sequence[JobId]) -> Dict[JobId, VoteTally]:
        """Count votes for several jobs (batch query).

        Args:
            job_ids: Jobs to count

        Returns:
            Tally per job; jobs without votes map to an empty tally
        """
        pass


class CommentVoteRepository(ABC):
    """Repository for helpful / not helpful reactions on comments."""

    @abstractmethod
    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentVote]:
        """Find a user's reaction to a comment."""
        pass

    @abstractmethod
    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[CommentVote]:
        """Find a user's reactions to multiple comments (batch query)."""
        pass

    @abstractmethod
    async def upsert(self, vote: CommentVote) -> CommentVote:
        """Insert a reaction, or overwrite the type of the existing one."""
        pass

    @abstractmethod
    async def delete_matching(
        self, user_id: UserId, comment_id: CommentId, vote_type: CommentVoteType
    ) -> None:
        """Delete the user's reaction only if it still has the expected type.

        Raises:
            ConflictRetryableError: If no row matched (changed concurrently)
        """
        pass

    @abstractmethod
    async def tally(self, comment_id: CommentId) -> VoteTally:
        """Count helpful and not helpful reactions on a comment."""
        pass

    @abstractmethod
    async def tally_many(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, VoteTally]:
        """Count reactions for several comments (batch query)."""
        pass
