"""PostgreSQL implementation of JobPosting repository."""

from datetime import datetime
from typing import List, Optional, Sequence

import logfire
from sqlalchemy import Select, asc, desc, func, or_, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from realjobs.config import RankingSettings
from realjobs.domain.model import JobPosting
from realjobs.domain.repository import JobRepository
from realjobs.domain.value import (
    JobFilters,
    JobId,
    JobStatus,
    RankingMode,
    UserId,
    VoteType,
)
from realjobs.persistence.mappers import job_to_dict, row_to_job
from realjobs.persistence.tables import (
    comments_table,
    job_postings_table,
    votes_table,
)


def _contains(term: str) -> str:
    """ILIKE pattern matching ``term`` literally anywhere in the value."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _apply_filters(stmt: Select, filters: JobFilters) -> Select:
    """Restrict a job query to active jobs matching the list filters."""
    t = job_postings_table
    stmt = stmt.where(t.c.status == JobStatus.ACTIVE.value)

    if filters.search:
        pattern = _contains(filters.search)
        stmt = stmt.where(
            or_(
                t.c.title.ilike(pattern, escape="\\"),
                t.c.company.ilike(pattern, escape="\\"),
                t.c.description.ilike(pattern, escape="\\"),
            )
        )
    if filters.category:
        stmt = stmt.where(t.c.category == filters.category)
    if filters.location:
        stmt = stmt.where(t.c.location.ilike(_contains(filters.location), escape="\\"))
    if filters.job_type:
        stmt = stmt.where(t.c.job_type == filters.job_type.value)
    if filters.min_trust_score is not None:
        stmt = stmt.where(t.c.trust_score >= filters.min_trust_score)
    return stmt


def _vote_counts():
    """Up and down vote counts per job."""
    return (
        select(
            votes_table.c.job_posting_id.label("job_id"),
            func.count()
            .filter(votes_table.c.vote_type == VoteType.UP.value)
            .label("up"),
            func.count()
            .filter(votes_table.c.vote_type == VoteType.DOWN.value)
            .label("down"),
        )
        .group_by(votes_table.c.job_posting_id)
        .subquery("vote_counts")
    )


def _comment_counts():
    """Comment count per job."""
    return (
        select(
            comments_table.c.job_posting_id.label("job_id"),
            func.count().label("comments"),
        )
        .group_by(comments_table.c.job_posting_id)
        .subquery("comment_counts")
    )


class PostgresJobRepository(JobRepository):
    """PostgreSQL implementation of JobRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, job_id: JobId) -> Optional[JobPosting]:
        """Find a job by ID."""
        stmt = select(job_postings_table).where(job_postings_table.c.id == job_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_job(row._asdict()) if row else None

    async def find_by_ids(self, job_ids: Sequence[JobId]) -> List[JobPosting]:
        """Find several jobs (batch query)."""
        if not job_ids:
            return []

        stmt = select(job_postings_table).where(job_postings_table.c.id.in_(job_ids))
        result = await self.session.execute(stmt)
        return [row_to_job(row._asdict()) for row in result.fetchall()]

    async def find_by_owner(self, owner_id: UserId) -> List[JobPosting]:
        """Find every job a user submitted, newest first."""
        t = job_postings_table
        stmt = (
            select(t)
            .where(t.c.owner_id == owner_id)
            .order_by(desc(t.c.created_at), asc(t.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_job(row._asdict()) for row in result.fetchall()]

    async def find_ranked(
        self,
        mode: RankingMode,
        filters: JobFilters,
        now: datetime,
        settings: RankingSettings,
        limit: int,
        offset: int = 0,
    ) -> List[JobPosting]:
        """Find active jobs matching filters in ranking order."""
        with logfire.span(
            "job_repository.find_ranked",
            mode=mode.value,
            limit=limit,
            offset=offset,
        ):
            t = job_postings_table
            votes = _vote_counts()
            comments = _comment_counts()

            up = func.coalesce(votes.c.up, 0)
            down = func.coalesce(votes.c.down, 0)
            comment_count = func.coalesce(comments.c.comments, 0)

            stmt = select(t).select_from(
                t.outerjoin(votes, votes.c.job_id == t.c.id).outerjoin(
                    comments, comments.c.job_id == t.c.id
                )
            )
            stmt = _apply_filters(stmt, filters)

            if mode == RankingMode.HOT:
                # Time-decay ranking: activity / (age_hours + offset)^gravity
                age_hours = func.greatest(
                    func.extract("epoch", now - t.c.created_at) / 3600, 0
                )
                activity = (up - down) + comment_count * settings.comment_weight
                score = activity / func.pow(
                    age_hours + settings.time_offset, settings.gravity
                )
                stmt = stmt.order_by(desc(score))
            elif mode == RankingMode.TOP:
                stmt = stmt.order_by(desc(up - down))
            elif mode == RankingMode.FAKE:
                stmt = stmt.where(down > 0).order_by(desc(down))

            stmt = (
                stmt.order_by(desc(t.c.created_at), asc(t.c.id))
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            jobs = [row_to_job(row._asdict()) for row in result.fetchall()]
            logfire.info("Ranked jobs fetched", mode=mode.value, count=len(jobs))
            return jobs

    async def count_flagged(self, filters: JobFilters) -> int:
        """Count active jobs matching filters with at least one down vote."""
        t = job_postings_table
        flagged = (
            select(votes_table.c.job_posting_id)
            .where(votes_table.c.vote_type == VoteType.DOWN.value)
            .distinct()
        )
        stmt = _apply_filters(
            select(func.count()).select_from(t).where(t.c.id.in_(flagged)), filters
        )
        result = await self.session.execute(stmt)
        count = result.scalar() or 0
        logfire.debug("Flagged jobs counted", count=count)
        return count
    async def save(self, job: JobPosting) -> JobPosting:
        """Save a job (insert or update)."""
        job_dict = job_to_dict(job)
        stmt = insert(job_postings_table).values(**job_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[job_postings_table.c.id],
            set_={
                key: stmt.excluded[key]
                for key in job_dict
                if key not in ("id", "owner_id", "created_at", "trust_score")
            },
        ).returning(job_postings_table)

        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.fetchone()
        return row_to_job(row._asdict()) if row else job

    async def update_trust_score(self, job_id: JobId, trust_score: int) -> None:
        """Store a recomputed trust score."""
        stmt = (
            update(job_postings_table)
            .where(job_postings_table.c.id == job_id)
            .values(trust_score=trust_score)
        )
        await self.session.execute(stmt)
        await self.session.flush()
