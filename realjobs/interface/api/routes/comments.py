"""Comment routes."""

from collections.abc import AsyncIterator
from datetime import datetime
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from realjobs.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from realjobs.domain.error import DomainError
from realjobs.domain.model import Comment
from realjobs.domain.service import AuthService, CommentNotifier, JobService
from realjobs.domain.value import JobId, Sentiment
from realjobs.interface.api.auth import current_user_id, get_auth_token
from realjobs.interface.error import to_http_exception

router = APIRouter(prefix="/jobs", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=1000)
    parent_id: str | None = None  # Parent comment ID for replies


class CommentEvent(BaseModel):
    """Comment pushed to live subscribers."""

    comment_id: str
    job_id: str
    author_id: str
    parent_id: str | None
    content: str
    sentiment: Sentiment
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentEvent":
        return cls(
            comment_id=str(comment.id),
            job_id=str(comment.job_id),
            author_id=str(comment.author_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            content=comment.content,
            sentiment=comment.sentiment,
            created_at=comment.created_at,
        )


def format_sse(event: str, data: str) -> str:
    """Encode one server-sent event frame."""
    lines = "".join(f"data: {line}\n" for line in data.splitlines() or [""])
    return f"event: {event}\n{lines}\n"


@router.get("/{job_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    job_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    auth_service: FromDishka[AuthService],
    token: str | None = Depends(get_auth_token),
) -> GetCommentsResponse:
    """Get the comment thread for a job.

    Roots and replies are newest first. If authenticated, each comment
    includes the user's own rating.

    Args:
        job_id: Job UUID
        get_comments_use_case: Get comments use case from DI
        auth_service: Token verification (injected)
        token: JWT from cookie or bearer header (optional)

    Returns:
        Comment forest with depth, reply permission and net counts
    """
    try:
        request = GetCommentsRequest(
            job_id=job_id, user_id=current_user_id(auth_service, token)
        )
        return await get_comments_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "get comments")


@router.post(
    "/{job_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    job_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    auth_service: FromDishka[AuthService],
    token: str | None = Depends(get_auth_token),
) -> CreateCommentResponse:
    """Comment on a job or reply to another comment.

    Requires authentication. Negative comments also cast a down vote on
    the job for their author.

    Raises:
        HTTPException: If not authenticated, the job is not found, or
            validation fails
    """
    try:
        use_case_request = CreateCommentRequest(
            job_id=job_id,
            content=request.content,
            parent_id=request.parent_id,
            user_id=current_user_id(auth_service, token),
        )
        return await create_comment_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "create comment")


@router.get("/{job_id}/comments/stream")
async def stream_comments(
    job_id: str,
    job_service: FromDishka[JobService],
    comment_notifier: FromDishka[CommentNotifier],
) -> StreamingResponse:
    """Stream new comments on a job as server-sent events.

    Each frame is a ``comment`` event whose data is the comment as JSON.

    Raises:
        HTTPException: If the job is not found
    """
    try:
        job = await job_service.get_job(JobId(UUID(job_id)))
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "stream comments")

    async def event_stream() -> AsyncIterator[str]:
        async for comment in comment_notifier.subscribe(job.id):
            logfire.debug("Streaming comment", comment_id=str(comment.id))
            yield format_sse(
                "comment", CommentEvent.from_domain(comment).model_dump_json()
            )

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )
