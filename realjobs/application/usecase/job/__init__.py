"""Job use cases."""

from .create_job import CreateJobRequest, CreateJobResponse, CreateJobUseCase
from .get_job import GetJobRequest, GetJobResponse, GetJobUseCase
from .list_jobs import JobListItem, ListJobsRequest, ListJobsResponse, ListJobsUseCase
from .update_job_status import (
    UpdateJobStatusRequest,
    UpdateJobStatusResponse,
    UpdateJobStatusUseCase,
)

__all__ = [
    "CreateJobRequest",
    "CreateJobResponse",
    "CreateJobUseCase",
    "GetJobRequest",
    "GetJobResponse",
    "GetJobUseCase",
    "JobListItem",
    "ListJobsRequest",
    "ListJobsResponse",
    "ListJobsUseCase",
    "UpdateJobStatusRequest",
    "UpdateJobStatusResponse",
    "UpdateJobStatusUseCase",
]
