"""Unit tests for job ranking."""

from datetime import timedelta
from uuid import uuid4

import pytest

from realjobs.config import RankingSettings
from realjobs.domain.model import Vote
from realjobs.domain.repository import CommentRepository, JobRepository, VoteRepository
from realjobs.domain.service import (
    RankedJob,
    RankingService,
    fake_cut,
    hot_score,
    matches,
    order,
)
from realjobs.domain.value import (
    JobFilters,
    JobStatus,
    JobType,
    RankingMode,
    UserId,
    VoteId,
    VoteType,
)
from tests.conftest import NOW, make_comment, make_job
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def add_votes(vote_repo, job_id, up: int = 0, down: int = 0) -> None:
    for vote_type, count in ((VoteType.UP, up), (VoteType.DOWN, down)):
        for _ in range(count):
            await vote_repo.upsert(
                Vote(
                    id=VoteId(uuid4()),
                    user_id=UserId(uuid4()),
                    job_id=job_id,
                    vote_type=vote_type,
                )
            )


class TestHotScore:
    """Tests for hot_score."""

    def test_younger_job_wins_equal_activity(self):
        """With the same votes, the younger job should score higher."""
        young = RankedJob(job=make_job(age=timedelta(hours=1)), vote_count=3)
        old = RankedJob(job=make_job(age=timedelta(hours=10)), vote_count=3)

        assert hot_score(young, NOW) > hot_score(old, NOW)

    def test_comments_count_at_half_weight(self):
        """Two comments should weigh the same as one vote."""
        job = make_job(age=timedelta(hours=2))
        by_votes = RankedJob(job=job, vote_count=1)
        by_comments = RankedJob(job=job, comment_count=2)

        assert hot_score(by_votes, NOW) == pytest.approx(hot_score(by_comments, NOW))

    def test_formula(self):
        """Score should be activity over (age + 2) ^ 1.5."""
        item = RankedJob(job=make_job(age=timedelta(hours=2)), vote_count=8)

        assert hot_score(item, NOW) == pytest.approx(8 / 4**1.5)


class TestFakeCut:
    """Tests for fake_cut."""

    @pytest.mark.parametrize(
        ("flagged", "expected"),
        [(0, 0), (3, 3), (10, 10), (15, 10), (21, 11), (40, 20)],
    )
    def test_half_with_floor(self, flagged, expected):
        """Half of the flagged jobs are shown, but at least ten."""
        assert fake_cut(flagged) == expected


class TestOrder:
    """Tests for the reference ordering."""

    def test_hot_tie_goes_to_younger_job(self):
        """Jobs with no activity fall back to newest first."""
        young = RankedJob(job=make_job(age=timedelta(hours=1)))
        old = RankedJob(job=make_job(age=timedelta(hours=5)))

        ordered = order([old, young], RankingMode.HOT, NOW)

        assert [i.job.id for i in ordered] == [young.job.id, old.job.id]

    def test_top_orders_by_net_votes_then_newest(self):
        """Top should sort by net votes, newest first on ties."""
        a = RankedJob(job=make_job(age=timedelta(hours=3)), vote_count=5)
        b = RankedJob(job=make_job(age=timedelta(hours=1)), vote_count=5)
        c = RankedJob(job=make_job(age=timedelta(hours=2)), vote_count=9)

        ordered = order([a, b, c], RankingMode.TOP, NOW)

        assert [i.job.id for i in ordered] == [c.job.id, b.job.id, a.job.id]

    def test_identical_timestamps_break_ties_by_id(self):
        """Ranking should be deterministic for identical jobs."""
        items = [RankedJob(job=make_job(age=timedelta(hours=1))) for _ in range(5)]

        forward = order(items, RankingMode.NEW, NOW)
        backward = order(list(reversed(items)), RankingMode.NEW, NOW)

        assert [i.job.id for i in forward] == [i.job.id for i in backward]
        assert [str(i.job.id) for i in forward] == sorted(str(i.job.id) for i in items)

    def test_fake_keeps_only_flagged_jobs(self):
        """Jobs without down votes never appear in the fake view."""
        flagged = [
            RankedJob(job=make_job(age=timedelta(hours=h)), downvote_count=1)
            for h in (1, 2, 3)
        ]
        clean = RankedJob(job=make_job(), upvote_count=4, vote_count=4)

        ordered = order([*flagged, clean], RankingMode.FAKE, NOW)

        assert {i.job.id for i in ordered} == {i.job.id for i in flagged}

    def test_fake_orders_by_down_votes(self):
        """The most flagged job comes first."""
        mild = RankedJob(job=make_job(age=timedelta(hours=1)), downvote_count=1)
        severe = RankedJob(job=make_job(age=timedelta(hours=9)), downvote_count=4)

        ordered = order([mild, severe], RankingMode.FAKE, NOW)

        assert [i.job.id for i in ordered] == [severe.job.id, mild.job.id]


class TestMatches:
    """Tests for the filter predicate."""

    def test_search_matches_company_case_insensitively(self):
        job = make_job(company="Globex Corporation")

        assert matches(job, JobFilters(search="globex"))
        assert not matches(job, JobFilters(search="initech"))

    def test_inactive_jobs_never_match(self):
        job = make_job(status=JobStatus.FILLED)

        assert not matches(job, JobFilters())

    def test_location_is_partial_match(self):
        job = make_job(location="Berlin, Germany")

        assert matches(job, JobFilters(location="berlin"))

    def test_structured_filters(self):
        job = make_job(category="engineering", job_type=JobType.REMOTE, trust_score=3)

        assert matches(
            job,
            JobFilters(category="engineering", job_type=JobType.REMOTE, min_trust_score=3),
        )
        assert not matches(job, JobFilters(min_trust_score=4))
        assert not matches(job, JobFilters(job_type=JobType.HYBRID))


class TestRankJobs:
    """Tests for RankingService.rank_jobs."""

    @pytest.mark.asyncio
    async def test_hot_prefers_younger_job_with_same_votes(self, unit_env):
        """The younger of two equally voted jobs should come first."""
        # Arrange
        ranking_service = await unit_env.get(RankingService)
        job_repo = await unit_env.get(JobRepository)
        vote_repo = await unit_env.get(VoteRepository)
        old = await job_repo.save(make_job(age=timedelta(hours=10)))
        young = await job_repo.save(make_job(age=timedelta(hours=1)))
        await add_votes(vote_repo, old.id, up=2)
        await add_votes(vote_repo, young.id, up=2)

        # Act
        page = await ranking_service.rank_jobs(
            RankingMode.HOT, JobFilters(), now=NOW
        )

        # Assert
        assert [i.job.id for i in page.items] == [young.id, old.id]
        assert page.items[0].upvote_count == 2

    @pytest.mark.asyncio
    async def test_new_pages_with_has_more(self, unit_env):
        """NEW should page newest first and report whether more exist."""
        # Arrange
        ranking_service = await unit_env.get(RankingService)
        job_repo = await unit_env.get(JobRepository)
        page_size = ranking_service.settings.page_size
        jobs = [
            await job_repo.save(make_job(age=timedelta(minutes=i)))
            for i in range(page_size + 3)
        ]

        # Act
        first = await ranking_service.rank_jobs(RankingMode.NEW, JobFilters(), now=NOW)
        second = await ranking_service.rank_jobs(
            RankingMode.NEW, JobFilters(), page=1, now=NOW
        )

        # Assert
        assert [i.job.id for i in first.items] == [j.id for j in jobs[:page_size]]
        assert first.has_more is True
        assert [i.job.id for i in second.items] == [j.id for j in jobs[page_size:]]
        assert second.has_more is False

    @pytest.mark.asyncio
    async def test_fake_floor_shows_all_three_flagged_jobs(self, unit_env):
        """Three flagged jobs are under the floor, so all of them are shown."""
        # Arrange
        ranking_service = await unit_env.get(RankingService)
        job_repo = await unit_env.get(JobRepository)
        vote_repo = await unit_env.get(VoteRepository)
        flagged = []
        for hours in (1, 2, 3):
            job = await job_repo.save(make_job(age=timedelta(hours=hours)))
            await add_votes(vote_repo, job.id, down=1)
            flagged.append(job)
        await job_repo.save(make_job())

        # Act
        page = await ranking_service.rank_jobs(RankingMode.FAKE, JobFilters(), now=NOW)
        later = await ranking_service.rank_jobs(
            RankingMode.FAKE, JobFilters(), page=1, now=NOW
        )

        # Assert
        assert [i.job.id for i in page.items] == [j.id for j in flagged]
        assert page.has_more is False
        assert later.items == []

    @pytest.mark.asyncio
    async def test_fake_pages_through_half_of_flagged_jobs(self, unit_env):
        """Thirty flagged jobs show the fifteen most flagged across two pages."""
        # Arrange
        ranking_service = await unit_env.get(RankingService)
        job_repo = await unit_env.get(JobRepository)
        vote_repo = await unit_env.get(VoteRepository)
        flagged = []
        for down in range(30, 0, -1):
            job = await job_repo.save(make_job())
            await add_votes(vote_repo, job.id, down=down)
            flagged.append(job)

        # Act
        first = await ranking_service.rank_jobs(RankingMode.FAKE, JobFilters(), now=NOW)
        second = await ranking_service.rank_jobs(
            RankingMode.FAKE, JobFilters(), page=1, now=NOW
        )

        # Assert
        assert [i.job.id for i in first.items] == [j.id for j in flagged[:10]]
        assert first.has_more is True
        assert [i.job.id for i in second.items] == [j.id for j in flagged[10:15]]
        assert second.has_more is False

    @pytest.mark.asyncio
    async def test_top_ranks_old_job_behind_many_newer_ones(self, unit_env):
        """An old, well-voted job leads TOP however many newer jobs exist."""
        # Arrange
        ranking_service = await unit_env.get(RankingService)
        job_repo = await unit_env.get(JobRepository)
        vote_repo = await unit_env.get(VoteRepository)
        veteran = await job_repo.save(make_job(age=timedelta(days=30)))
        await add_votes(vote_repo, veteran.id, up=50)
        for minutes in range(600):
            await job_repo.save(make_job(age=timedelta(minutes=minutes)))

        # Act
        page = await ranking_service.rank_jobs(RankingMode.TOP, JobFilters(), now=NOW)

        # Assert
        assert page.items[0].job.id == veteran.id
        assert page.items[0].vote_count == 50
        assert page.has_more is True

    @pytest.mark.asyncio
    async def test_annotate_counts_comments(self, unit_env):
        """Annotated jobs should carry their comment counts."""
        # Arrange
        ranking_service = await unit_env.get(RankingService)
        job_repo = await unit_env.get(JobRepository)
        comment_repo = await unit_env.get(CommentRepository)
        job = await job_repo.save(make_job())
        await comment_repo.save(make_comment(job.id))
        await comment_repo.save(make_comment(job.id))

        # Act
        [item] = await ranking_service.annotate([job], NOW)

        # Assert
        assert item.comment_count == 2
        assert item.vote_count == 0

    @pytest.mark.asyncio
    async def test_filters_apply_before_ranking(self, unit_env):
        """Only jobs matching the filters should be ranked."""
        # Arrange
        ranking_service = await unit_env.get(RankingService)
        job_repo = await unit_env.get(JobRepository)
        remote = await job_repo.save(make_job(job_type=JobType.REMOTE))
        await job_repo.save(make_job(job_type=JobType.ONSITE))

        # Act
        page = await ranking_service.rank_jobs(
            RankingMode.TOP, JobFilters(job_type=JobType.REMOTE), now=NOW
        )

        # Assert
        assert [i.job.id for i in page.items] == [remote.id]

    def test_default_settings_match_documented_values(self):
        settings = RankingSettings()

        assert (settings.gravity, settings.time_offset, settings.comment_weight) == (
            1.5,
            2.0,
            0.5,
        )
        assert settings.page_size == 10
