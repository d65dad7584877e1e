"""Trust score domain service.

The trust score of a job is its net legitimacy vote count. It is cached on
the job row for sorting and filtering, and always recomputed from the vote
ledger rather than adjusted in place.
"""

from datetime import datetime, timedelta

import logfire

from realjobs.config import TrustSettings
from realjobs.domain.error import NotFoundError
from realjobs.domain.repository import JobRepository, VoteRepository
from realjobs.domain.value import Badge, BadgeColor, JobId

from .base import Service

# Age brackets for the freshness badges, checked in order
_AGE_BADGES: tuple[tuple[timedelta, Badge], ...] = (
    (timedelta(hours=4), Badge.NEW),
    (timedelta(hours=24), Badge.TODAY),
    (timedelta(days=2), Badge.YESTERDAY),
    (timedelta(days=7), Badge.THIS_WEEK),
)


def derive_badge(
    score: int,
    created_at: datetime,
    now: datetime,
    settings: TrustSettings | None = None,
) -> Badge | None:
    """Pick the display badge for a job.

    Community verdicts take priority over freshness: a three day old job
    with a score of 25 is "Community Verified", not "THIS WEEK".

    Args:
        score: Current trust score
        created_at: When the job was posted
        now: Reference time
        settings: Thresholds (defaults apply when omitted)

    Returns:
        The badge, or None for jobs older than a week with an ordinary score
    """
    settings = settings or TrustSettings()

    if score >= settings.verified_threshold:
        return Badge.COMMUNITY_VERIFIED
    if score < settings.suspicious_threshold:
        return Badge.SUSPICIOUS

    age = now - created_at
    for limit, badge in _AGE_BADGES:
        if age <= limit:
            return badge
    return None


def badge_color(score: int, settings: TrustSettings | None = None) -> BadgeColor:
    """Map a trust score to its display color."""
    settings = settings or TrustSettings()

    if score >= settings.green_threshold:
        return BadgeColor.GREEN
    if score >= settings.blue_threshold:
        return BadgeColor.BLUE
    if score >= settings.gray_threshold:
        return BadgeColor.GRAY
    if score < 0:
        return BadgeColor.RED
    return BadgeColor.YELLOW


class TrustService(Service):
    """Domain service keeping cached trust scores in line with the ledger."""

    def __init__(
        self,
        job_repository: JobRepository,
        vote_repository: VoteRepository,
        trust_settings: TrustSettings,
    ) -> None:
        """Initialize trust service.

        Args:
            job_repository: Job repository
            vote_repository: Vote repository
            trust_settings: Badge thresholds
        """
        self.job_repository = job_repository
        self.vote_repository = vote_repository
        self.settings = trust_settings

    async def compute_trust_score(self, job_id: JobId) -> int:
        """Read the net vote count for a job from the ledger.

        Args:
            job_id: Job ID

        Returns:
            Up votes minus down votes
        """
        with logfire.span("trust_service.compute_trust_score", job_id=str(job_id)):
            tally = await self.vote_repository.tally(job_id)
            return tally.net

    async def refresh_trust_score(self, job_id: JobId) -> int:
        """Recompute a job's trust score and store it on the job.

        Args:
            job_id: Job ID

        Returns:
            The stored score
        """
        with logfire.span("trust_service.refresh_trust_score", job_id=str(job_id)):
            score = await self.compute_trust_score(job_id)
            await self.job_repository.update_trust_score(job_id, score)
            logfire.info("Trust score refreshed", job_id=str(job_id), score=score)
            return score

    async def verify_trust_score(self, job_id: JobId) -> bool:
        """Check that the cached score matches the ledger.

        Args:
            job_id: Job ID

        Returns:
            True when there is no drift

        Raises:
            NotFoundError: If the job does not exist
        """
        with logfire.span("trust_service.verify_trust_score", job_id=str(job_id)):
            job = await self.job_repository.find_by_id(job_id)
            if not job:
                raise NotFoundError("Job", str(job_id))

            score = await self.compute_trust_score(job_id)
            if score != job.trust_score:
                logfire.warn(
                    "Trust score drift detected",
                    job_id=str(job_id),
                    cached=job.trust_score,
                    ledger=score,
                )
                return False
            return True

    def badge_for(self, score: int, created_at: datetime, now: datetime) -> Badge | None:
        """Badge using the configured thresholds."""
        return derive_badge(score, created_at, now, self.settings)

    def color_for(self, score: int) -> BadgeColor:
        """Color using the configured thresholds."""
        return badge_color(score, self.settings)
