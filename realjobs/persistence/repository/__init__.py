"""PostgreSQL repository implementations."""

from realjobs.persistence.repository.bookmark import PostgresBookmarkRepository
from realjobs.persistence.repository.comment import PostgresCommentRepository
from realjobs.persistence.repository.job import PostgresJobRepository
from realjobs.persistence.repository.profile import PostgresProfileRepository
from realjobs.persistence.repository.transaction import SessionTransaction
from realjobs.persistence.repository.vote import (
    PostgresCommentVoteRepository,
    PostgresVoteRepository,
)

__all__ = [
    "PostgresJobRepository",
    "PostgresVoteRepository",
    "PostgresCommentVoteRepository",
    "PostgresCommentRepository",
    "PostgresBookmarkRepository",
    "PostgresProfileRepository",
    "SessionTransaction",
]
