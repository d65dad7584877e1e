"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from realjobs.config import Settings
from realjobs.domain.repository import (
    BookmarkRepository,
    CommentRepository,
    CommentVoteRepository,
    JobRepository,
    ProfileRepository,
    Transaction,
    VoteRepository,
)
from realjobs.persistence.database import create_engine, create_session_factory
from realjobs.persistence.repository import (
    PostgresBookmarkRepository,
    PostgresCommentRepository,
    PostgresCommentVoteRepository,
    PostgresJobRepository,
    PostgresProfileRepository,
    PostgresVoteRepository,
    SessionTransaction,
)
from realjobs.util.di.base import ProviderBase
from realjobs.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_transaction(self, session: AsyncSession) -> Transaction:
        """Provide the request transaction."""
        return SessionTransaction(session)

    @provide(scope=Scope.REQUEST)
    def get_job_repository(self, session: AsyncSession) -> JobRepository:
        """Provide JobPosting repository."""
        return PostgresJobRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_vote_repository(
        self, session: AsyncSession
    ) -> CommentVoteRepository:
        """Provide CommentVote repository."""
        return PostgresCommentVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_bookmark_repository(self, session: AsyncSession) -> BookmarkRepository:
        """Provide Bookmark repository."""
        return PostgresBookmarkRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)
