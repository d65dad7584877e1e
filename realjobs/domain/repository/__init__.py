"""Repository interfaces for the job board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from realjobs.domain.repository.bookmark import BookmarkRepository
from realjobs.domain.repository.comment import CommentRepository
from realjobs.domain.repository.job import JobRepository
from realjobs.domain.repository.profile import ProfileRepository
from realjobs.domain.repository.transaction import Transaction
from realjobs.domain.repository.vote import CommentVoteRepository, VoteRepository

__all__ = [
    "JobRepository",
    "VoteRepository",
    "CommentVoteRepository",
    "CommentRepository",
    "BookmarkRepository",
    "ProfileRepository",
    "Transaction",
]
