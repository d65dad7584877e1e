"""Tests for the in-memory repositories used by the unit suite."""

from datetime import timedelta
from uuid import UUID, uuid4

import pytest

from realjobs.domain.error import ConflictRetryableError
from realjobs.domain.model import Vote
from realjobs.config import RankingSettings
from realjobs.domain.value import (
    JobFilters,
    JobId,
    JobStatus,
    JobType,
    RankingMode,
    UserId,
    VoteId,
    VoteType,
)
from realjobs.persistence.repository.inmemory import (
    InMemoryJobRepository,
    InMemoryVoteRepository,
)
from tests.conftest import NOW, make_job

SETTINGS = RankingSettings()


class TestInMemoryJobRepository:
    """Tests for InMemoryJobRepository.find_ranked and save."""

    @pytest.mark.asyncio
    async def test_newest_first_with_stable_ties(self):
        # Arrange
        repo = InMemoryJobRepository()
        older = make_job(age=timedelta(hours=5))
        tie_a = make_job(id=JobId(UUID(int=1)), age=timedelta(hours=1))
        tie_b = make_job(id=JobId(UUID(int=2)), age=timedelta(hours=1))
        for job in (older, tie_b, tie_a):
            await repo.save(job)

        # Act
        found = await repo.find_ranked(RankingMode.NEW, JobFilters(), NOW, SETTINGS, limit=10)

        # Assert
        assert [j.id for j in found] == [tie_a.id, tie_b.id, older.id]

    @pytest.mark.asyncio
    async def test_paging(self):
        repo = InMemoryJobRepository()
        jobs = [make_job(age=timedelta(hours=h)) for h in range(1, 6)]
        for job in jobs:
            await repo.save(job)

        page = await repo.find_ranked(
            RankingMode.NEW, JobFilters(), NOW, SETTINGS, limit=2, offset=2
        )

        assert [j.id for j in page] == [jobs[2].id, jobs[3].id]

    @pytest.mark.asyncio
    async def test_filters_and_inactive_jobs(self):
        # Arrange
        repo = InMemoryJobRepository()
        remote = make_job(title="Remote Data Engineer", job_type=JobType.REMOTE)
        onsite = make_job(title="Onsite Data Engineer")
        filled = make_job(title="Filled Data Engineer", status=JobStatus.FILLED)
        for job in (remote, onsite, filled):
            await repo.save(job)

        # Act
        found = await repo.find_ranked(
            RankingMode.NEW,
            JobFilters(search="data engineer", job_type=JobType.REMOTE),
            NOW,
            SETTINGS,
            limit=10,
        )

        # Assert
        assert [j.id for j in found] == [remote.id]

    @pytest.mark.asyncio
    async def test_top_and_fake_read_linked_vote_counts(self):
        # Arrange
        votes = InMemoryVoteRepository()
        repo = InMemoryJobRepository(vote_repository=votes)
        liked = await repo.save(make_job(age=timedelta(days=3)))
        flagged = await repo.save(make_job(age=timedelta(hours=1)))
        await votes.upsert(
            Vote(
                id=VoteId(uuid4()),
                user_id=UserId(uuid4()),
                job_id=liked.id,
                vote_type=VoteType.UP,
            )
        )
        await votes.upsert(
            Vote(
                id=VoteId(uuid4()),
                user_id=UserId(uuid4()),
                job_id=flagged.id,
                vote_type=VoteType.DOWN,
            )
        )

        # Act
        top = await repo.find_ranked(
            RankingMode.TOP, JobFilters(), NOW, SETTINGS, limit=10
        )
        fake = await repo.find_ranked(
            RankingMode.FAKE, JobFilters(), NOW, SETTINGS, limit=10
        )
        flagged_count = await repo.count_flagged(JobFilters())

        # Assert
        assert [j.id for j in top] == [liked.id, flagged.id]
        assert [j.id for j in fake] == [flagged.id]
        assert flagged_count == 1

    @pytest.mark.asyncio
    async def test_save_keeps_stored_trust_score(self):
        repo = InMemoryJobRepository()
        job = await repo.save(make_job())
        await repo.update_trust_score(job.id, 12)

        saved = await repo.save(job.model_copy(update={"title": "Staff Python Engineer"}))

        assert saved.trust_score == 12
        assert saved.title == "Staff Python Engineer"


class TestInMemoryVoteRepository:
    """Tests for InMemoryVoteRepository."""

    def _vote(self, user_id: UserId, job_id: JobId, vote_type: VoteType) -> Vote:
        return Vote(
            id=VoteId(uuid4()),
            user_id=user_id,
            job_id=job_id,
            vote_type=vote_type,
            created_at=NOW,
        )

    @pytest.mark.asyncio
    async def test_upsert_swings_existing_vote(self, user_id):
        repo = InMemoryVoteRepository()
        job_id = JobId(uuid4())

        await repo.upsert(self._vote(user_id, job_id, VoteType.UP))
        await repo.upsert(self._vote(user_id, job_id, VoteType.DOWN))

        tally = await repo.tally(job_id)
        assert (tally.positive, tally.negative) == (0, 1)

    @pytest.mark.asyncio
    async def test_delete_matching_conflicts_on_changed_vote(self, user_id):
        repo = InMemoryVoteRepository()
        job_id = JobId(uuid4())
        await repo.upsert(self._vote(user_id, job_id, VoteType.DOWN))

        with pytest.raises(ConflictRetryableError):
            await repo.delete_matching(user_id, job_id, VoteType.UP)

        assert await repo.find_by_user_and_job(user_id, job_id) is not None
