"""Job posting domain service."""

from typing import Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from realjobs.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from realjobs.domain.model.common import utcnow
from realjobs.domain.model.job import JobPosting
from realjobs.domain.repository import JobRepository
from realjobs.domain.value import JobId, JobStatus, JobType, UserId, is_http_url

from .base import Service


def _optional(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class JobService(Service):
    """Domain service for job submission and lifecycle."""

    def __init__(self, job_repository: JobRepository) -> None:
        """Initialize job service.

        Args:
            job_repository: Job repository
        """
        self.job_repository = job_repository

    async def create_job(
        self,
        owner_id: UserId,
        url: str,
        title: str,
        company: str,
        job_type: JobType,
        description: str | None = None,
        category: str | None = None,
        location: str | None = None,
    ) -> JobPosting:
        """Submit a new job posting.

        New postings start active with a trust score of zero.

        Args:
            owner_id: Submitting user
            url: Link to the original posting (http or https)
            title: Job title (5-200 characters)
            company: Company name (2-100 characters)
            job_type: Remote, hybrid or onsite
            description: Short summary (at most 500 characters)
            category: Free-form category
            location: Location (at most 100 characters)

        Returns:
            Created job

        Raises:
            ValidationError: If any field is invalid
        """
        with logfire.span(
            "job_service.create_job", owner_id=str(owner_id), company=company
        ):
            url = url.strip()
            if not is_http_url(url):
                logfire.warn("Invalid job URL", url=url)
                raise ValidationError("Please enter a valid URL")

            try:
                job = JobPosting(
                    id=JobId(uuid4()),
                    owner_id=owner_id,
                    url=url,
                    title=title.strip(),
                    company=company.strip(),
                    description=_optional(description),
                    category=_optional(category),
                    location=_optional(location),
                    job_type=job_type,
                )
            except PydanticValidationError as e:
                fields = ", ".join(str(err["loc"][0]) for err in e.errors())
                logfire.warn("Invalid job submission", fields=fields)
                raise ValidationError(f"Invalid job posting: {fields}")

            saved = await self.job_repository.save(job)
            logfire.info("Job created", job_id=str(saved.id), owner_id=str(owner_id))
            return saved

    async def get_job(self, job_id: JobId) -> JobPosting:
        """Get a job by ID.

        Raises:
            NotFoundError: If the job does not exist
        """
        with logfire.span("job_service.get_job", job_id=str(job_id)):
            job = await self.job_repository.find_by_id(job_id)
            if not job:
                logfire.warn("Job not found", job_id=str(job_id))
                raise NotFoundError("Job", str(job_id))
            return job

    async def get_jobs_by_ids(self, job_ids: Sequence[JobId]) -> list[JobPosting]:
        """Get several jobs, preserving the order of ``job_ids``."""
        if not job_ids:
            return []
        found = {job.id: job for job in await self.job_repository.find_by_ids(job_ids)}
        return [found[jid] for jid in job_ids if jid in found]

    async def update_status(
        self, job_id: JobId, user_id: UserId, status: JobStatus
    ) -> JobPosting:
        """Change a job's lifecycle status.

        Only the owner may do this. Jobs are never deleted; expired and
        filled jobs simply drop out of the listings.

        Args:
            job_id: Job ID
            user_id: User requesting the change
            status: New status

        Returns:
            Updated job

        Raises:
            NotFoundError: If the job does not exist
            NotAuthorizedError: If the user is not the owner
        """
        with logfire.span(
            "job_service.update_status",
            job_id=str(job_id),
            user_id=str(user_id),
            status=status.value,
        ):
            job = await self.get_job(job_id)
            if job.owner_id != user_id:
                logfire.warn(
                    "Unauthorized status change attempt",
                    job_id=str(job_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("job", str(job_id), str(user_id))

            updated = job.model_copy(update={"status": status, "updated_at": utcnow()})
            saved = await self.job_repository.save(updated)
            logfire.info("Job status updated", job_id=str(job_id), status=status.value)
            return saved
