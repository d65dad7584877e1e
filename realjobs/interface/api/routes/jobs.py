"""Job posting routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from realjobs.application.usecase.job import (
    CreateJobRequest,
    CreateJobResponse,
    CreateJobUseCase,
    GetJobRequest,
    GetJobResponse,
    GetJobUseCase,
    ListJobsRequest,
    ListJobsResponse,
    ListJobsUseCase,
    UpdateJobStatusRequest,
    UpdateJobStatusResponse,
    UpdateJobStatusUseCase,
)
from realjobs.domain.error import DomainError
from realjobs.domain.service import AuthService
from realjobs.domain.value import JobStatus, JobType, RankingMode
from realjobs.interface.api.auth import (
    current_user_fields,
    current_user_id,
    get_auth_token,
)
from realjobs.interface.error import to_http_exception

router = APIRouter(prefix="/jobs", tags=["jobs"], route_class=DishkaRoute)


class CreateJobAPIRequest(BaseModel):
    """API request for submitting a job posting."""

    url: str = Field(min_length=1, max_length=2048)
    title: str = Field(min_length=5, max_length=200)
    company: str = Field(min_length=2, max_length=100)
    job_type: JobType = JobType.ONSITE
    description: str | None = Field(default=None, max_length=500)
    category: str | None = Field(default=None, max_length=50)
    location: str | None = Field(default=None, max_length=100)


class UpdateJobStatusAPIRequest(BaseModel):
    """API request for changing a job's status."""

    status: JobStatus


@router.get("", response_model=ListJobsResponse)
async def list_jobs(
    list_jobs_use_case: FromDishka[ListJobsUseCase],
    auth_service: FromDishka[AuthService],
    sort: RankingMode = RankingMode.HOT,
    search: str | None = Query(default=None, max_length=200),
    category: str | None = None,
    location: str | None = Query(default=None, max_length=100),
    job_type: JobType | None = None,
    min_score: int | None = None,
    page: int = Query(default=0, ge=0),
    token: str | None = Depends(get_auth_token),
) -> ListJobsResponse:
    """List jobs ranked by hot, new, top or fake.

    If authenticated, each job includes the user's own vote.

    Args:
        list_jobs_use_case: List jobs use case from DI
        auth_service: Token verification (injected)
        sort: Ranking mode
        search: Case-insensitive match on title, company or description
        category: Exact category
        location: Case-insensitive partial location match
        job_type: Remote, hybrid or onsite
        min_score: Minimum trust score
        page: Zero-based page number
        token: JWT from cookie or bearer header

    Returns:
        One page of ranked jobs
    """
    try:
        request = ListJobsRequest(
            sort=sort,
            search=search,
            category=category,
            location=location,
            job_type=job_type,
            min_trust_score=min_score,
            page=page,
            user_id=current_user_id(auth_service, token),
        )
        return await list_jobs_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "list jobs")


@router.post("", response_model=CreateJobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    request: CreateJobAPIRequest,
    create_job_use_case: FromDishka[CreateJobUseCase],
    auth_service: FromDishka[AuthService],
    token: str | None = Depends(get_auth_token),
) -> CreateJobResponse:
    """Submit a job posting.

    Requires authentication. New jobs start active with a trust score of 0.
    The first submission also creates the user's profile.

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    try:
        use_case_request = CreateJobRequest(
            **request.model_dump(), **current_user_fields(auth_service, token)
        )
        return await create_job_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "submit job")


@router.get("/{job_id}", response_model=GetJobResponse)
async def get_job(
    job_id: str,
    get_job_use_case: FromDishka[GetJobUseCase],
    auth_service: FromDishka[AuthService],
    token: str | None = Depends(get_auth_token),
) -> GetJobResponse:
    """Get a job with its trust score, badge, color and the user's state.

    Raises:
        HTTPException: If the job is not found
    """
    try:
        request = GetJobRequest(
            job_id=job_id, user_id=current_user_id(auth_service, token)
        )
        return await get_job_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "get job")


@router.patch("/{job_id}/status", response_model=UpdateJobStatusResponse)
async def update_job_status(
    job_id: str,
    request: UpdateJobStatusAPIRequest,
    update_job_status_use_case: FromDishka[UpdateJobStatusUseCase],
    auth_service: FromDishka[AuthService],
    token: str | None = Depends(get_auth_token),
) -> UpdateJobStatusResponse:
    """Mark a job active, expired or filled.

    Only the submitter can change the status.

    Raises:
        HTTPException: If not authenticated, not the owner, or not found
    """
    user_id = current_user_id(auth_service, token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to update a job",
        )

    try:
        use_case_request = UpdateJobStatusRequest(
            job_id=job_id, status=request.status, user_id=user_id
        )
        return await update_job_status_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "update job status")
