"""In-memory repository implementations for testing."""

from .bookmark import InMemoryBookmarkRepository
from .comment import InMemoryCommentRepository
from .job import InMemoryJobRepository
from .profile import InMemoryProfileRepository
from .transaction import InMemoryTransaction
from .vote import InMemoryCommentVoteRepository, InMemoryVoteRepository

__all__ = [
    "InMemoryBookmarkRepository",
    "InMemoryCommentRepository",
    "InMemoryCommentVoteRepository",
    "InMemoryJobRepository",
    "InMemoryProfileRepository",
    "InMemoryTransaction",
    "InMemoryVoteRepository",
]
