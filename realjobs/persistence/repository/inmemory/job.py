"""In-memory job repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from realjobs.config import RankingSettings
from realjobs.domain.model.job import JobPosting
from realjobs.domain.repository.comment import CommentRepository
from realjobs.domain.repository.job import JobRepository
from realjobs.domain.repository.vote import VoteRepository
from realjobs.domain.service.ranking_service import RankedJob, matches, order
from realjobs.domain.value import JobFilters, JobId, RankingMode, UserId


class InMemoryJobRepository(JobRepository):
    """In-memory implementation of JobRepository for testing.

    Ranking reads counts from the vote and comment repositories it is given,
    the way the SQL query joins their tables.
    """

    def __init__(
        self,
        vote_repository: VoteRepository | None = None,
        comment_repository: CommentRepository | None = None,
    ) -> None:
        self.jobs: dict[JobId, JobPosting] = {}
        self.vote_repository = vote_repository
        self.comment_repository = comment_repository

    async def find_by_id(self, job_id: JobId) -> Optional[JobPosting]:
        """Find a job by ID."""
        return self.jobs.get(job_id)

    async def find_by_ids(self, job_ids: Sequence[JobId]) -> list[JobPosting]:
        """Find several jobs."""
        return [self.jobs[jid] for jid in job_ids if jid in self.jobs]

    async def find_by_owner(self, owner_id: UserId) -> list[JobPosting]:
        """Find every job a user submitted, newest first."""
        found = [job for job in self.jobs.values() if job.owner_id == owner_id]
        found.sort(key=lambda j: str(j.id))
        found.sort(key=lambda j: j.created_at, reverse=True)
        return found

    async def _counted(self, filters: JobFilters) -> list[RankedJob]:
        found = [job for job in self.jobs.values() if matches(job, filters)]
        job_ids = [job.id for job in found]
        tallies = (
            await self.vote_repository.tally_many(job_ids)
            if self.vote_repository
            else {}
        )
        comment_counts = (
            await self.comment_repository.count_by_jobs(job_ids)
            if self.comment_repository
            else {}
        )

        items = []
        for job in found:
            tally = tallies.get(job.id)
            up = tally.positive if tally else 0
            down = tally.negative if tally else 0
            items.append(
                RankedJob(
                    job=job,
                    vote_count=up - down,
                    upvote_count=up,
                    downvote_count=down,
                    comment_count=comment_counts.get(job.id, 0),
                )
            )
        return items

    async def find_ranked(
        self,
        mode: RankingMode,
        filters: JobFilters,
        now: datetime,
        settings: RankingSettings,
        limit: int,
        offset: int = 0,
    ) -> list[JobPosting]:
        """Find active jobs matching filters in ranking order."""
        ordered = order(await self._counted(filters), mode, now, settings)
        return [item.job for item in ordered[offset : offset + limit]]

    async def count_flagged(self, filters: JobFilters) -> int:
        """Count active jobs matching filters with at least one down vote."""
        return sum(1 for item in await self._counted(filters) if item.downvote_count > 0)

    async def save(self, job: JobPosting) -> JobPosting:
        """Save a job, keeping the stored trust score on update."""
        existing = self.jobs.get(job.id)
        if existing:
            job = job.model_copy(update={"trust_score": existing.trust_score})
        self.jobs[job.id] = job
        return job

    async def update_trust_score(self, job_id: JobId, trust_score: int) -> None:
        """Store a recomputed trust score."""
        job = self.jobs.get(job_id)
        if job:
            self.jobs[job_id] = job.model_copy(update={"trust_score": trust_score})
