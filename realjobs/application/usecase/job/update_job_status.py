"""Update job status use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from realjobs.application.usecase.base import BaseUseCase, require_user
from realjobs.domain.service import JobService
from realjobs.domain.value import JobId, JobStatus, UserId


class UpdateJobStatusRequest(BaseModel):
    """Update job status request."""

    job_id: str  # UUID string
    status: JobStatus
    user_id: str | None = None  # User ID from authenticated user


class UpdateJobStatusResponse(BaseModel):
    """Update job status response."""

    job_id: str
    status: JobStatus
    updated_at: datetime


class UpdateJobStatusUseCase(BaseUseCase):
    """Use case for marking a job expired, filled or active again."""

    def __init__(self, job_service: JobService) -> None:
        """Initialize update job status use case.

        Args:
            job_service: Job domain service
        """
        self.job_service = job_service

    async def execute(self, request: UpdateJobStatusRequest) -> UpdateJobStatusResponse:
        """Execute update job status flow.

        Raises:
            UnauthorizedError: If not authenticated
            NotFoundError: If the job does not exist
            NotAuthorizedError: If the user does not own the job
        """
        user_id = require_user(
            UserId(UUID(request.user_id)) if request.user_id else None,
            "update a job",
        )

        job = await self.job_service.update_status(
            JobId(UUID(request.job_id)), user_id, request.status
        )

        return UpdateJobStatusResponse(
            job_id=str(job.id), status=job.status, updated_at=job.updated_at
        )
