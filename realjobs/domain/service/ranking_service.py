"""Ranking domain service.

Four views over active jobs:

- hot: votes and comment activity decayed by age
- new: most recent first
- top: highest net vote count
- fake: jobs the community has flagged with down votes
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Sequence

import logfire

from realjobs.config import RankingSettings
from realjobs.domain.model.common import utcnow
from realjobs.domain.model.job import JobPosting
from realjobs.domain.repository import (
    CommentRepository,
    JobRepository,
    VoteRepository,
)
from realjobs.domain.value import Badge, BadgeColor, JobFilters, RankingMode

from .base import Service
from .trust_service import TrustService


@dataclass(frozen=True)
class RankedJob:
    """A job annotated with the counts used for ranking and display."""

    job: JobPosting
    vote_count: int = 0
    upvote_count: int = 0
    downvote_count: int = 0
    comment_count: int = 0
    badge: Badge | None = None
    badge_color: BadgeColor = BadgeColor.YELLOW


@dataclass(frozen=True)
class RankedPage:
    """One page of ranked jobs."""

    items: list[RankedJob] = field(default_factory=list)
    page: int = 0
    page_size: int = 10
    has_more: bool = False


def hot_score(
    item: RankedJob, now: datetime, settings: RankingSettings | None = None
) -> float:
    """Activity score decayed by age.

    score = (votes + comments * weight) / (age_hours + offset) ^ gravity

    Args:
        item: Annotated job
        now: Reference time
        settings: Decay parameters (defaults apply when omitted)

    Returns:
        Hot score; younger jobs win ties on activity
    """
    settings = settings or RankingSettings()
    age_hours = max((now - item.job.created_at).total_seconds() / 3600, 0.0)
    activity = item.vote_count + item.comment_count * settings.comment_weight
    return activity / math.pow(age_hours + settings.time_offset, settings.gravity)


def fake_cut(n: int, settings: RankingSettings | None = None) -> int:
    """How many flagged jobs the fake view shows.

    Half of the flagged jobs, but never fewer than the floor (or all of
    them when there are fewer than the floor).
    """
    settings = settings or RankingSettings()
    return min(n, max(math.ceil(n * settings.fake_ratio), settings.fake_floor))


def _newest_first(items: Iterable[RankedJob]) -> list[RankedJob]:
    # Stable sorts: id ascending breaks ties left by created_at
    ordered = sorted(items, key=lambda i: str(i.job.id))
    ordered.sort(key=lambda i: i.job.created_at, reverse=True)
    return ordered


def order(
    items: Sequence[RankedJob],
    mode: RankingMode,
    now: datetime,
    settings: RankingSettings | None = None,
) -> list[RankedJob]:
    """Order annotated jobs for a view.

    Reference ordering for the ranked query the repositories run.
    Deterministic: every mode breaks remaining ties by job id.

    Args:
        items: Annotated jobs
        mode: Ranking mode
        now: Reference time for hot scores
        settings: Ranking parameters

    Returns:
        Ordered jobs; the fake view keeps only flagged jobs
    """
    settings = settings or RankingSettings()

    if mode == RankingMode.NEW:
        return _newest_first(items)

    if mode == RankingMode.HOT:
        ordered = _newest_first(items)
        ordered.sort(key=lambda i: hot_score(i, now, settings), reverse=True)
        return ordered

    if mode == RankingMode.TOP:
        ordered = _newest_first(items)
        ordered.sort(key=lambda i: i.vote_count, reverse=True)
        return ordered

    flagged = _newest_first(i for i in items if i.downvote_count > 0)
    flagged.sort(key=lambda i: i.downvote_count, reverse=True)
    return flagged


def matches(job: JobPosting, filters: JobFilters) -> bool:
    """Whether a job passes the list filters.

    Reference predicate for the query the repositories run.
    """
    if not job.is_active:
        return False

    if filters.search:
        needle = filters.search.lower()
        haystacks = (job.title, job.company, job.description or "")
        if not any(needle in h.lower() for h in haystacks):
            return False

    if filters.category and job.category != filters.category:
        return False

    if filters.location and filters.location.lower() not in (job.location or "").lower():
        return False

    if filters.job_type and job.job_type != filters.job_type:
        return False

    if filters.min_trust_score is not None and job.trust_score < filters.min_trust_score:
        return False

    return True


class RankingService(Service):
    """Domain service listing jobs by ranking mode."""

    def __init__(
        self,
        job_repository: JobRepository,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
        trust_service: TrustService,
        ranking_settings: RankingSettings,
    ) -> None:
        """Initialize ranking service.

        Args:
            job_repository: Job repository
            vote_repository: Vote repository (batch tallies)
            comment_repository: Comment repository (batch counts)
            trust_service: Badge and color thresholds
            ranking_settings: Ranking configuration
        """
        self.job_repository = job_repository
        self.vote_repository = vote_repository
        self.comment_repository = comment_repository
        self.trust_service = trust_service
        self.settings = ranking_settings

    async def rank_jobs(
        self,
        mode: RankingMode,
        filters: JobFilters,
        page: int = 0,
        now: datetime | None = None,
    ) -> RankedPage:
        """Get one page of active jobs in ranking order.

        Every mode is ordered over all matching jobs by the repository and
        paged there. ``fake`` pages through its cut: half of the flagged
        jobs, but at least the floor.

        Args:
            mode: Ranking mode
            filters: Job filters
            page: Zero-based page number
            now: Reference time (defaults to the current time)

        Returns:
            The requested page
        """
        now = now or utcnow()
        page = max(page, 0)
        page_size = self.settings.page_size
        start = page * page_size

        with logfire.span(
            "ranking_service.rank_jobs", mode=mode.value, page=page
        ):
            if mode == RankingMode.FAKE:
                cut = fake_cut(
                    await self.job_repository.count_flagged(filters), self.settings
                )
                limit = max(min(page_size, cut - start), 0)
                jobs = (
                    await self.job_repository.find_ranked(
                        mode, filters, now, self.settings, limit=limit, offset=start
                    )
                    if limit
                    else []
                )
                has_more = start + page_size < cut
            else:
                jobs = await self.job_repository.find_ranked(
                    mode, filters, now, self.settings, limit=page_size + 1, offset=start
                )
                has_more = len(jobs) > page_size
                jobs = jobs[:page_size]

            items = await self.annotate(jobs, now)
            logfire.info("Jobs ranked", mode=mode.value, page=page, count=len(items))
            return RankedPage(
                items=items, page=page, page_size=page_size, has_more=has_more
            )

    async def annotate(
        self, jobs: Sequence[JobPosting], now: datetime
    ) -> list[RankedJob]:
        """Attach vote and comment counts, badge and color to jobs.

        Counts are fetched in two batch queries regardless of job count.
        """
        if not jobs:
            return []

        job_ids = [job.id for job in jobs]
        tallies = await self.vote_repository.tally_many(job_ids)
        comment_counts = await self.comment_repository.count_by_jobs(job_ids)

        items = []
        for job in jobs:
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
                    badge=self.trust_service.badge_for(
                        job.trust_score, job.created_at, now
                    ),
                    badge_color=self.trust_service.color_for(job.trust_score),
                )
            )
        return items
