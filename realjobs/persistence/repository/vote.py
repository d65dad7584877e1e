"""PostgreSQL implementations of the vote repositories.

Writes are single statements relying on the (user, target) unique
constraints, so concurrent requests can't create duplicate rows.
"""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from realjobs.domain.error import ConflictRetryableError
from realjobs.domain.model import CommentVote, Vote, VoteTally
from realjobs.domain.repository import CommentVoteRepository, VoteRepository
from realjobs.domain.value import CommentId, CommentVoteType, JobId, UserId, VoteType
from realjobs.persistence.mappers import (
    comment_vote_to_dict,
    row_to_comment_vote,
    row_to_vote,
    vote_to_dict,
)
from realjobs.persistence.tables import comment_votes_table, votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_job(
        self, user_id: UserId, job_id: JobId
    ) -> Optional[Vote]:
        """Find a user's vote on a job."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.job_posting_id == job_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_jobs(
        self, user_id: UserId, job_ids: Sequence[JobId]
    ) -> List[Vote]:
        """Find a user's votes on multiple jobs (batch query)."""
        if not job_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.job_posting_id.in_(job_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or overwrite the existing vote's type."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            index_elements=[votes_table.c.user_id, votes_table.c.job_posting_id],
            set_={"vote_type": stmt.excluded.vote_type},
        ).returning(votes_table)

        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_vote(result.one()._asdict())

    async def delete_matching(
        self, user_id: UserId, job_id: JobId, vote_type: VoteType
    ) -> None:
        """Delete the vote only if it still has the expected type."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.job_posting_id == job_id,
                votes_table.c.vote_type == vote_type.value,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise ConflictRetryableError(
                f"Vote by {user_id} on job {job_id} changed before removal"
            )

    async def insert_if_absent(self, vote: Vote) -> bool:
        """Insert a vote unless one exists; never touches the existing row."""
        stmt = (
            insert(votes_table)
            .values(**vote_to_dict(vote))
            .on_conflict_do_nothing(
                index_elements=[votes_table.c.user_id, votes_table.c.job_posting_id]
            )
            .returning(votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.fetchone() is not None

    async def tally(self, job_id: JobId) -> VoteTally:
        """Count up and down votes on a job."""
        tallies = await self.tally_many([job_id])
        return tallies[job_id]

    async def tally_many(self, job_ids: Sequence[JobId]) -> Dict[JobId, VoteTally]:
        """Count votes for several jobs in one grouped query."""
        if not job_ids:
            return {}

        stmt = (
            select(
                votes_table.c.job_posting_id,
                func.count().filter(votes_table.c.vote_type == VoteType.UP.value),
                func.count().filter(votes_table.c.vote_type == VoteType.DOWN.value),
            )
            .where(votes_table.c.job_posting_id.in_(job_ids))
            .group_by(votes_table.c.job_posting_id)
        )
        result = await self.session.execute(stmt)
        counts = {
            job_id: VoteTally(positive=up, negative=down)
            for job_id, up, down in result.fetchall()
        }
        return {job_id: counts.get(job_id, VoteTally()) for job_id in job_ids}


class PostgresCommentVoteRepository(CommentVoteRepository):
    """PostgreSQL implementation of CommentVoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentVote]:
        """Find a user's reaction to a comment."""
        stmt = select(comment_votes_table).where(
            and_(
                comment_votes_table.c.user_id == user_id,
                comment_votes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_vote(row._asdict()) if row else None

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[CommentVote]:
        """Find a user's reactions to multiple comments (batch query)."""
        if not comment_ids:
            return []

        stmt = select(comment_votes_table).where(
            and_(
                comment_votes_table.c.user_id == user_id,
                comment_votes_table.c.comment_id.in_(comment_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_vote(row._asdict()) for row in result.fetchall()]

    async def upsert(self, vote: CommentVote) -> CommentVote:
        """Insert a reaction or overwrite the existing reaction's type."""
        stmt = insert(comment_votes_table).values(**comment_vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            index_elements=[
                comment_votes_table.c.user_id,
                comment_votes_table.c.comment_id,
            ],
            set_={"vote_type": stmt.excluded.vote_type},
        ).returning(comment_votes_table)

        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_comment_vote(result.one()._asdict())

    async def delete_matching(
        self, user_id: UserId, comment_id: CommentId, vote_type: CommentVoteType
    ) -> None:
        """Delete the reaction only if it still has the expected type."""
        stmt = delete(comment_votes_table).where(
            and_(
                comment_votes_table.c.user_id == user_id,
                comment_votes_table.c.comment_id == comment_id,
                comment_votes_table.c.vote_type == vote_type.value,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise ConflictRetryableError(
                f"Reaction by {user_id} on comment {comment_id} changed before removal"
            )

    async def tally(self, comment_id: CommentId) -> VoteTally:
        """Count reactions on a comment."""
        tallies = await self.tally_many([comment_id])
        return tallies[comment_id]

    async def tally_many(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, VoteTally]:
        """Count reactions for several comments in one grouped query."""
        if not comment_ids:
            return {}

        helpful = CommentVoteType.HELPFUL.value
        not_helpful = CommentVoteType.NOT_HELPFUL.value
        stmt = (
            select(
                comment_votes_table.c.comment_id,
                func.count().filter(comment_votes_table.c.vote_type == helpful),
                func.count().filter(comment_votes_table.c.vote_type == not_helpful),
            )
            .where(comment_votes_table.c.comment_id.in_(comment_ids))
            .group_by(comment_votes_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        counts = {
            comment_id: VoteTally(positive=pos, negative=neg)
            for comment_id, pos, neg in result.fetchall()
        }
        return {cid: counts.get(cid, VoteTally()) for cid in comment_ids}
