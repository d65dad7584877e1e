"""Vote entities.

Two independent ledgers: legitimacy votes on job postings and helpfulness
reactions on comments. Each user holds at most one entry per target.
"""

from datetime import datetime

from pydantic import Field

from realjobs.domain.model.common import DomainModel, utcnow
from realjobs.domain.value import (
    CommentId,
    CommentVoteId,
    CommentVoteType,
    JobId,
    UserId,
    VoteId,
    VoteType,
)


class Vote(DomainModel):
    """Vote on a job posting.

    Business rules:
    - One vote per user per job (enforced by database unique constraint)
    - Casting the same type again removes it, casting the other type swings it
    """

    id: VoteId
    user_id: UserId
    job_id: JobId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=utcnow)


class CommentVote(DomainModel):
    """Helpful / not helpful reaction on a comment.

    Same toggle rules as ``Vote`` in a separate namespace.
    """

    id: CommentVoteId
    user_id: UserId
    comment_id: CommentId
    vote_type: CommentVoteType
    created_at: datetime = Field(default_factory=utcnow)


class VoteTally(DomainModel):
    """Positive and negative counts for a single target."""

    positive: int = 0
    negative: int = 0

    @property
    def net(self) -> int:
        return self.positive - self.negative
