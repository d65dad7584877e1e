"""In-memory vote repositories for testing.

Keyed by (user, target) so the one-vote-per-pair constraint holds the same
way the database unique constraint enforces it.
"""

from typing import Optional, Sequence

from realjobs.domain.error import ConflictRetryableError
from realjobs.domain.model.vote import CommentVote, Vote, VoteTally
from realjobs.domain.repository.vote import CommentVoteRepository, VoteRepository
from realjobs.domain.value import CommentId, CommentVoteType, JobId, UserId, VoteType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self.votes: dict[tuple[UserId, JobId], Vote] = {}

    async def find_by_user_and_job(
        self, user_id: UserId, job_id: JobId
    ) -> Optional[Vote]:
        """Find a user's vote on a job."""
        return self.votes.get((user_id, job_id))

    async def find_by_user_and_jobs(
        self, user_id: UserId, job_ids: Sequence[JobId]
    ) -> list[Vote]:
        """Find a user's votes on multiple jobs."""
        return [
            self.votes[(user_id, jid)] for jid in job_ids if (user_id, jid) in self.votes
        ]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or overwrite the existing vote's type."""
        key = (vote.user_id, vote.job_id)
        existing = self.votes.get(key)
        if existing:
            vote = existing.model_copy(update={"vote_type": vote.vote_type})
        self.votes[key] = vote
        return vote

    async def delete_matching(
        self, user_id: UserId, job_id: JobId, vote_type: VoteType
    ) -> None:
        """Delete the vote only if it still has the expected type."""
        key = (user_id, job_id)
        existing = self.votes.get(key)
        if not existing or existing.vote_type != vote_type:
            raise ConflictRetryableError(
                f"Vote by {user_id} on job {job_id} changed before removal"
            )
        del self.votes[key]

    async def insert_if_absent(self, vote: Vote) -> bool:
        """Insert a vote unless one exists."""
        key = (vote.user_id, vote.job_id)
        if key in self.votes:
            return False
        self.votes[key] = vote
        return True

    async def tally(self, job_id: JobId) -> VoteTally:
        """Count up and down votes on a job."""
        up = down = 0
        for (_, jid), vote in self.votes.items():
            if jid == job_id:
                if vote.vote_type == VoteType.UP:
                    up += 1
                else:
                    down += 1
        return VoteTally(positive=up, negative=down)

    async def tally_many(self, job_ids: Sequence[JobId]) -> dict[JobId, VoteTally]:
        """Count votes for several jobs."""
        return {jid: await self.tally(jid) for jid in job_ids}


class InMemoryCommentVoteRepository(CommentVoteRepository):
    """In-memory implementation of CommentVoteRepository for testing."""

    def __init__(self) -> None:
        self.votes: dict[tuple[UserId, CommentId], CommentVote] = {}

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentVote]:
        """Find a user's reaction to a comment."""
        return self.votes.get((user_id, comment_id))

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> list[CommentVote]:
        """Find a user's reactions to multiple comments."""
        return [
            self.votes[(user_id, cid)]
            for cid in comment_ids
            if (user_id, cid) in self.votes
        ]

    async def upsert(self, vote: CommentVote) -> CommentVote:
        """Insert a reaction or overwrite the existing reaction's type."""
        key = (vote.user_id, vote.comment_id)
        existing = self.votes.get(key)
        if existing:
            vote = existing.model_copy(update={"vote_type": vote.vote_type})
        self.votes[key] = vote
        return vote

    async def delete_matching(
        self, user_id: UserId, comment_id: CommentId, vote_type: CommentVoteType
    ) -> None:
        """Delete the reaction only if it still has the expected type."""
        key = (user_id, comment_id)
        existing = self.votes.get(key)
        if not existing or existing.vote_type != vote_type:
            raise ConflictRetryableError(
                f"Reaction by {user_id} on comment {comment_id} changed before removal"
            )
        del self.votes[key]

    async def tally(self, comment_id: CommentId) -> VoteTally:
        """Count reactions on a comment."""
        helpful = not_helpful = 0
        for (_, cid), vote in self.votes.items():
            if cid == comment_id:
                if vote.vote_type == CommentVoteType.HELPFUL:
                    helpful += 1
                else:
                    not_helpful += 1
        return VoteTally(positive=helpful, negative=not_helpful)

    async def tally_many(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, VoteTally]:
        """Count reactions for several comments."""
        return {cid: await self.tally(cid) for cid in comment_ids}
