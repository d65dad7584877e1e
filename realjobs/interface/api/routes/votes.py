"""Vote routes."""

from typing import Literal

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from realjobs.application.usecase.vote import (
    CastCommentVoteRequest,
    CastCommentVoteResponse,
    CastCommentVoteUseCase,
    CastJobVoteRequest,
    CastJobVoteResponse,
    CastJobVoteUseCase,
)
from realjobs.domain.error import DomainError
from realjobs.domain.service import AuthService
from realjobs.interface.api.auth import current_user_id, get_auth_token
from realjobs.interface.error import to_http_exception

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class JobVoteAPIRequest(BaseModel):
    """API request for voting on a job."""

    vote_type: Literal["up", "down"]


class CommentVoteAPIRequest(BaseModel):
    """API request for rating a comment."""

    vote_type: Literal["helpful", "not_helpful"]


@router.post("/jobs/{job_id}/vote", response_model=CastJobVoteResponse)
async def vote_on_job(
    job_id: str,
    request: JobVoteAPIRequest,
    cast_job_vote_use_case: FromDishka[CastJobVoteUseCase],
    auth_service: FromDishka[AuthService],
    token: str | None = Depends(get_auth_token),
) -> CastJobVoteResponse:
    """Vote a job legitimate (up) or fake (down).

    Repeating a vote removes it; voting the other way swings it.

    Args:
        job_id: Job UUID
        request: Vote type
        cast_job_vote_use_case: Cast job vote use case from DI
        auth_service: Token verification (injected)
        token: JWT from cookie or bearer header

    Returns:
        Vote state after the cast and the job's trust score

    Raises:
        HTTPException: If not authenticated or the job is not found
    """
    try:
        use_case_request = CastJobVoteRequest(
            job_id=job_id,
            vote_type=request.vote_type,
            user_id=current_user_id(auth_service, token),
        )
        result = await cast_job_vote_use_case.execute(use_case_request)
        logfire.info(
            "Job vote cast", job_id=job_id, delta=result.delta, score=result.trust_score
        )
        return result
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "vote on job")


@router.post("/comments/{comment_id}/vote", response_model=CastCommentVoteResponse)
async def vote_on_comment(
    comment_id: str,
    request: CommentVoteAPIRequest,
    cast_comment_vote_use_case: FromDishka[CastCommentVoteUseCase],
    auth_service: FromDishka[AuthService],
    token: str | None = Depends(get_auth_token),
) -> CastCommentVoteResponse:
    """Rate a comment helpful or not helpful.

    Raises:
        HTTPException: If not authenticated or the comment is not found
    """
    try:
        use_case_request = CastCommentVoteRequest(
            comment_id=comment_id,
            vote_type=request.vote_type,
            user_id=current_user_id(auth_service, token),
        )
        return await cast_comment_vote_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "vote on comment")
