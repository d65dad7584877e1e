"""Job posting repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from realjobs.config import RankingSettings
from realjobs.domain.model.job import JobPosting
from realjobs.domain.value import JobFilters, JobId, RankingMode, UserId


class JobRepository(ABC):
    """Repository for JobPosting aggregate.

    Defines the contract for job persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, job_id: JobId) -> Optional[JobPosting]:
        """Find a job posting by ID.

        Args:
            job_id: The job's unique identifier

        Returns:
            The job if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, job_ids: Sequence[JobId]) -> List[JobPosting]:
        """Find several job postings at once (batch query).

        Args:
            job_ids: IDs to look up; unknown IDs are skipped

        Returns:
            The jobs found, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> List[JobPosting]:
        """Find every job a user submitted, whatever its status.

        Args:
            owner_id: The submitting user

        Returns:
            Jobs, newest first
        """
        pass

    @abstractmethod
    async def find_ranked(
        self,
        mode: RankingMode,
        filters: JobFilters,
        now: datetime,
        settings: RankingSettings,
        limit: int,
        offset: int = 0,
    ) -> List[JobPosting]:
        """Find active jobs matching filters in ranking order.

        Ordering runs over every matching job, not a recent window, using
        vote and comment counts read from the ledger:

        - hot: (net votes + comments * weight) / (age_hours + offset) ^ gravity
        - new: created_at descending
        - top: net votes descending
        - fake: only jobs with down votes, down vote count descending

        Remaining ties go to the newer job, then the lower id.

        Args:
            mode: Ranking mode
            filters: Search, category, location, job type and minimum score
            now: Reference time for job age
            settings: Hot score parameters
            limit: Maximum number of jobs to return
            offset: Number of jobs to skip

        Returns:
            One window of the ranked jobs
        """
        pass

    @abstractmethod
    async def count_flagged(self, filters: JobFilters) -> int:
        """Count active jobs matching filters that have at least one down vote.

        Args:
            filters: Job filters

        Returns:
            Number of flagged jobs
        """
        pass

    @abstractmethod
    async def save(self, job: JobPosting) -> JobPosting:
        """Save a job posting (create or update).

        Args:
            job: The job to save

        Returns:
            The saved job
        """
        pass

    @abstractmethod
    async def update_trust_score(self, job_id: JobId, trust_score: int) -> None:
        """Store a recomputed trust score on the job.

        Args:
            job_id: Job to update
            trust_score: Net vote count read from the ledger
        """
        pass
