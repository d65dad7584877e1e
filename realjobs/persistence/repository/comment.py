"""PostgreSQL implementation of Comment repository."""

from typing import Dict, List, Optional, Sequence

import logfire
from sqlalchemy import asc, desc, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from realjobs.domain.model import Comment
from realjobs.domain.repository import CommentRepository
from realjobs.domain.value import CommentId, JobId, UserId
from realjobs.persistence.mappers import comment_to_dict, row_to_comment
from realjobs.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_job(self, job_id: JobId) -> List[Comment]:
        """Find all comments on a job."""
        with logfire.span("comment_repository.find_by_job", job_id=str(job_id)):
            stmt = select(comments_table).where(
                comments_table.c.job_posting_id == job_id
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_author(self, author_id: UserId, limit: int) -> List[Comment]:
        """Find a user's most recent comments."""
        with logfire.span(
            "comment_repository.find_by_author", author_id=str(author_id), limit=limit
        ):
            stmt = (
                select(comments_table)
                .where(comments_table.c.author_id == author_id)
                .order_by(desc(comments_table.c.created_at), asc(comments_table.c.id))
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's comments."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.author_id == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def count_by_jobs(self, job_ids: Sequence[JobId]) -> Dict[JobId, int]:
        """Count comments for several jobs in one grouped query."""
        if not job_ids:
            return {}

        stmt = (
            select(comments_table.c.job_posting_id, func.count())
            .where(comments_table.c.job_posting_id.in_(job_ids))
            .group_by(comments_table.c.job_posting_id)
        )
        result = await self.session.execute(stmt)
        counts = {job_id: count for job_id, count in result.fetchall()}
        return {job_id: counts.get(job_id, 0) for job_id in job_ids}
