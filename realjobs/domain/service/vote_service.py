"""Vote domain service.

A user holds at most one vote per target. Casting a vote toggles:

- no existing vote: the vote is stored (delta +sign)
- same type again: the vote is removed (delta -sign)
- the other type: the vote swings (delta 2 x sign)
"""

from dataclasses import dataclass
from typing import Sequence
from uuid import uuid4

import logfire

from realjobs.config import VotingSettings
from realjobs.domain.error import ConflictRetryableError, NotFoundError
from realjobs.domain.model.vote import CommentVote, Vote
from realjobs.domain.repository import (
    CommentRepository,
    CommentVoteRepository,
    JobRepository,
    VoteRepository,
)
from realjobs.domain.value import (
    CommentId,
    CommentVoteId,
    CommentVoteType,
    JobId,
    UserId,
    VoteId,
    VoteType,
)

from .base import Service
from .trust_service import TrustService


@dataclass(frozen=True)
class VoteOutcome:
    """Result of casting a vote.

    ``current`` is None when the cast removed the user's vote.
    ``net_count`` is read back from the ledger after the write.
    """

    previous: VoteType | CommentVoteType | None
    current: VoteType | CommentVoteType | None
    delta: int
    net_count: int


def _sign(vote_type: VoteType | CommentVoteType | None) -> int:
    return vote_type.sign if vote_type is not None else 0


class VoteService(Service):
    """Domain service for the job and comment vote ledgers."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_vote_repository: CommentVoteRepository,
        job_repository: JobRepository,
        comment_repository: CommentRepository,
        trust_service: TrustService,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Job vote repository
            comment_vote_repository: Comment vote repository
            job_repository: Job repository
            comment_repository: Comment repository
            trust_service: Trust score service
            voting_settings: Voting configuration
        """
        self.vote_repository = vote_repository
        self.comment_vote_repository = comment_vote_repository
        self.job_repository = job_repository
        self.comment_repository = comment_repository
        self.trust_service = trust_service
        self.settings = voting_settings

    async def cast_job_vote(
        self, user_id: UserId, job_id: JobId, vote_type: VoteType
    ) -> VoteOutcome:
        """Cast, remove or swing a legitimacy vote on a job.

        The job's trust score is recomputed from the ledger afterwards.

        Args:
            user_id: Voting user
            job_id: Job being voted on
            vote_type: Up or down

        Returns:
            Outcome with the confirmed net count

        Raises:
            NotFoundError: If the job does not exist
        """
        with logfire.span(
            "vote_service.cast_job_vote",
            job_id=str(job_id),
            user_id=str(user_id),
            vote_type=vote_type.value,
        ):
            job = await self.job_repository.find_by_id(job_id)
            if not job:
                logfire.warn("Vote on non-existent job", job_id=str(job_id))
                raise NotFoundError("Job", str(job_id))

            previous: VoteType | None = None
            current: VoteType | None = None
            for attempt in range(self.settings.max_conflict_retries + 1):
                existing = await self.vote_repository.find_by_user_and_job(
                    user_id, job_id
                )
                previous = existing.vote_type if existing else None
                try:
                    if previous == vote_type:
                        await self.vote_repository.delete_matching(
                            user_id, job_id, vote_type
                        )
                        current = None
                    else:
                        await self.vote_repository.upsert(
                            Vote(
                                id=VoteId(uuid4()),
                                user_id=user_id,
                                job_id=job_id,
                                vote_type=vote_type,
                            )
                        )
                        current = vote_type
                    break
                except ConflictRetryableError:
                    logfire.warn(
                        "Vote changed concurrently, re-reading",
                        job_id=str(job_id),
                        user_id=str(user_id),
                        attempt=attempt,
                    )
            else:
                # Another writer kept winning; report whatever the ledger holds now
                latest = await self.vote_repository.find_by_user_and_job(
                    user_id, job_id
                )
                current = latest.vote_type if latest else None

            net_count = await self.trust_service.refresh_trust_score(job_id)
            delta = _sign(current) - _sign(previous)

            logfire.info(
                "Job vote cast",
                job_id=str(job_id),
                user_id=str(user_id),
                previous=previous.value if previous else None,
                current=current.value if current else None,
                delta=delta,
                net_count=net_count,
            )
            return VoteOutcome(
                previous=previous, current=current, delta=delta, net_count=net_count
            )

    async def cast_comment_vote(
        self, user_id: UserId, comment_id: CommentId, vote_type: CommentVoteType
    ) -> VoteOutcome:
        """Cast, remove or swing a helpful / not helpful reaction on a comment.

        Args:
            user_id: Reacting user
            comment_id: Comment being rated
            vote_type: Helpful or not helpful

        Returns:
            Outcome with the comment's net count after the write

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "vote_service.cast_comment_vote",
            comment_id=str(comment_id),
            user_id=str(user_id),
            vote_type=vote_type.value,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Vote on non-existent comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            previous: CommentVoteType | None = None
            current: CommentVoteType | None = None
            for attempt in range(self.settings.max_conflict_retries + 1):
                existing = await self.comment_vote_repository.find_by_user_and_comment(
                    user_id, comment_id
                )
                previous = existing.vote_type if existing else None
                try:
                    if previous == vote_type:
                        await self.comment_vote_repository.delete_matching(
                            user_id, comment_id, vote_type
                        )
                        current = None
                    else:
                        await self.comment_vote_repository.upsert(
                            CommentVote(
                                id=CommentVoteId(uuid4()),
                                user_id=user_id,
                                comment_id=comment_id,
                                vote_type=vote_type,
                            )
                        )
                        current = vote_type
                    break
                except ConflictRetryableError:
                    logfire.warn(
                        "Comment vote changed concurrently, re-reading",
                        comment_id=str(comment_id),
                        user_id=str(user_id),
                        attempt=attempt,
                    )
            else:
                latest = await self.comment_vote_repository.find_by_user_and_comment(
                    user_id, comment_id
                )
                current = latest.vote_type if latest else None

            tally = await self.comment_vote_repository.tally(comment_id)
            delta = _sign(current) - _sign(previous)

            logfire.info(
                "Comment vote cast",
                comment_id=str(comment_id),
                user_id=str(user_id),
                delta=delta,
                net_count=tally.net,
            )
            return VoteOutcome(
                previous=previous, current=current, delta=delta, net_count=tally.net
            )

    async def get_user_vote(self, user_id: UserId, job_id: JobId) -> VoteType | None:
        """Get the user's current vote on a job, if any."""
        vote = await self.vote_repository.find_by_user_and_job(user_id, job_id)
        return vote.vote_type if vote else None

    async def get_user_comment_vote(
        self, user_id: UserId, comment_id: CommentId
    ) -> CommentVoteType | None:
        """Get the user's current reaction to a comment, if any."""
        vote = await self.comment_vote_repository.find_by_user_and_comment(
            user_id, comment_id
        )
        return vote.vote_type if vote else None

    async def get_user_votes_for_jobs(
        self, user_id: UserId, job_ids: Sequence[JobId]
    ) -> dict[JobId, VoteType]:
        """Get the user's votes on several jobs.

        Args:
            user_id: User ID
            job_ids: Jobs to check

        Returns:
            Mapping of job ID to vote type; jobs without a vote are absent
        """
        if not job_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_user_and_jobs(user_id, job_ids)
        return {vote.job_id: vote.vote_type for vote in votes}

    async def get_user_votes_for_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, CommentVoteType]:
        """Get the user's reactions to several comments.

        Args:
            user_id: User ID
            comment_ids: Comments to check

        Returns:
            Mapping of comment ID to reaction; comments without one are absent
        """
        if not comment_ids:
            return {}

        votes = await self.comment_vote_repository.find_by_user_and_comments(
            user_id, comment_ids
        )
        return {vote.comment_id: vote.vote_type for vote in votes}

    async def get_net_count(self, job_id: JobId) -> int:
        """Up votes minus down votes on a job, read from the ledger."""
        tally = await self.vote_repository.tally(job_id)
        return tally.net

    async def get_comment_net_count(self, comment_id: CommentId) -> int:
        """Helpful minus not helpful reactions on a comment."""
        tally = await self.comment_vote_repository.tally(comment_id)
        return tally.net

    async def get_comment_net_counts(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Net reaction counts for several comments."""
        if not comment_ids:
            return {}

        tallies = await self.comment_vote_repository.tally_many(comment_ids)
        return {cid: tallies[cid].net for cid in comment_ids if cid in tallies}
