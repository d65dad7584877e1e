"""PostgreSQL implementation of Bookmark repository."""

from typing import List

from sqlalchemy import and_, delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from realjobs.domain.model import Bookmark
from realjobs.domain.repository import BookmarkRepository
from realjobs.domain.value import JobId, UserId
from realjobs.persistence.mappers import row_to_bookmark
from realjobs.persistence.tables import bookmarks_table


class PostgresBookmarkRepository(BookmarkRepository):
    """PostgreSQL implementation of BookmarkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, user_id: UserId, job_id: JobId) -> bool:
        """Check whether the user has bookmarked the job."""
        stmt = (
            select(func.count())
            .select_from(bookmarks_table)
            .where(
                and_(
                    bookmarks_table.c.user_id == user_id,
                    bookmarks_table.c.job_posting_id == job_id,
                )
            )
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def add(self, bookmark: Bookmark) -> bool:
        """Add a bookmark unless it already exists."""
        stmt = (
            insert(bookmarks_table)
            .values(
                user_id=bookmark.user_id,
                job_posting_id=bookmark.job_id,
                created_at=bookmark.created_at,
            )
            .on_conflict_do_nothing()
            .returning(bookmarks_table.c.user_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.fetchone() is not None

    async def remove(self, user_id: UserId, job_id: JobId) -> bool:
        """Remove a bookmark."""
        stmt = delete(bookmarks_table).where(
            and_(
                bookmarks_table.c.user_id == user_id,
                bookmarks_table.c.job_posting_id == job_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_by_user(self, user_id: UserId) -> List[Bookmark]:
        """Find a user's bookmarks, most recent first."""
        stmt = (
            select(bookmarks_table)
            .where(bookmarks_table.c.user_id == user_id)
            .order_by(desc(bookmarks_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_bookmark(row._asdict()) for row in result.fetchall()]
