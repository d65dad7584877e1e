"""Mock persistence providers for testing."""

from dishka import Scope, provide

from realjobs.domain.repository import (
    BookmarkRepository,
    CommentRepository,
    CommentVoteRepository,
    JobRepository,
    ProfileRepository,
    Transaction,
    VoteRepository,
)
from realjobs.persistence.repository.inmemory import (
    InMemoryBookmarkRepository,
    InMemoryCommentRepository,
    InMemoryCommentVoteRepository,
    InMemoryJobRepository,
    InMemoryProfileRepository,
    InMemoryTransaction,
    InMemoryVoteRepository,
)
from realjobs.util.di import ProviderBase
from realjobs.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_transaction(self) -> Transaction:
        """Provide in-memory transaction."""
        return InMemoryTransaction()

    @provide(scope=Scope.REQUEST)
    def get_job_repository(
        self, votes: VoteRepository, comments: CommentRepository
    ) -> JobRepository:
        """Provide in-memory job repository ranking over the sibling repositories."""
        return InMemoryJobRepository(votes, comments)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.REQUEST)
    def get_comment_vote_repository(self) -> CommentVoteRepository:
        """Provide in-memory comment vote repository."""
        return InMemoryCommentVoteRepository()

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.REQUEST)
    def get_bookmark_repository(self) -> BookmarkRepository:
        """Provide in-memory bookmark repository."""
        return InMemoryBookmarkRepository()

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository()


class SharedInMemoryPersistenceProvider(ProviderBase):
    """In-memory repositories shared by every request of one container.

    Used by API tests, where a scenario spans several HTTP requests.
    Not a PersistenceProvider subclass so component selection ignores it.
    """

    scope = Scope.APP

    @provide(scope=Scope.REQUEST)
    def get_transaction(self) -> Transaction:
        return InMemoryTransaction()

    @provide
    def get_job_repository(
        self, votes: VoteRepository, comments: CommentRepository
    ) -> JobRepository:
        return InMemoryJobRepository(votes, comments)

    @provide
    def get_vote_repository(self) -> VoteRepository:
        return InMemoryVoteRepository()

    @provide
    def get_comment_vote_repository(self) -> CommentVoteRepository:
        return InMemoryCommentVoteRepository()

    @provide
    def get_comment_repository(self) -> CommentRepository:
        return InMemoryCommentRepository()

    @provide
    def get_bookmark_repository(self) -> BookmarkRepository:
        return InMemoryBookmarkRepository()

    @provide
    def get_profile_repository(self) -> ProfileRepository:
        return InMemoryProfileRepository()
