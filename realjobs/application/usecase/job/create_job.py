"""Create job use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from realjobs.application.usecase.base import BaseUseCase, require_user
from realjobs.domain.service import JobService, ProfileService
from realjobs.domain.value import JobStatus, JobType, UserId


class CreateJobRequest(BaseModel):
    """Create job request."""

    url: str
    title: str
    company: str
    job_type: JobType = JobType.ONSITE
    description: str | None = None
    category: str | None = None
    location: str | None = None
    user_id: str | None = None  # User ID from authenticated user
    user_email: str | None = None


class CreateJobResponse(BaseModel):
    """Create job response."""

    job_id: str
    url: str
    title: str
    company: str
    job_type: JobType
    status: JobStatus
    trust_score: int
    created_at: datetime


class CreateJobUseCase(BaseUseCase):
    """Use case for submitting a job posting."""

    def __init__(
        self, job_service: JobService, profile_service: ProfileService
    ) -> None:
        """Initialize create job use case.

        Args:
            job_service: Job domain service
            profile_service: Creates the submitter's profile on first use
        """
        self.job_service = job_service
        self.profile_service = profile_service

    async def execute(self, request: CreateJobRequest) -> CreateJobResponse:
        """Execute create job flow.

        Args:
            request: Job fields and the submitting user

        Returns:
            The created job

        Raises:
            UnauthorizedError: If not authenticated
            ValidationError: If any field is invalid
        """
        owner_id = require_user(
            UserId(UUID(request.user_id)) if request.user_id else None,
            "submit a job",
        )
        await self.profile_service.ensure_profile(owner_id, request.user_email)

        job = await self.job_service.create_job(
            owner_id=owner_id,
            url=request.url,
            title=request.title,
            company=request.company,
            job_type=request.job_type,
            description=request.description,
            category=request.category,
            location=request.location,
        )

        return CreateJobResponse(
            job_id=str(job.id),
            url=job.url,
            title=job.title,
            company=job.company,
            job_type=job.job_type,
            status=job.status,
            trust_score=job.trust_score,
            created_at=job.created_at,
        )
