"""Domain value objects for the job board."""

from realjobs.domain.value.common import is_http_url
from realjobs.domain.value.identifiers import (
    CommentId,
    CommentVoteId,
    JobId,
    UserId,
    VoteId,
)
from realjobs.domain.value.types import (
    Badge,
    BadgeColor,
    CommentVoteType,
    JobFilters,
    JobStatus,
    JobType,
    RankingMode,
    Sentiment,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "JobId",
    "CommentId",
    "VoteId",
    "CommentVoteId",
    # Types
    "JobType",
    "JobStatus",
    "VoteType",
    "CommentVoteType",
    "Sentiment",
    "RankingMode",
    "Badge",
    "BadgeColor",
    "JobFilters",
    # Checks
    "is_http_url",
]
