"""Cast comment vote use case."""

from uuid import UUID

from pydantic import BaseModel

from realjobs.application.usecase.base import BaseUseCase, require_user
from realjobs.domain.error import ValidationError
from realjobs.domain.service import VoteService
from realjobs.domain.value import CommentId, CommentVoteType, UserId


class CastCommentVoteRequest(BaseModel):
    """Cast comment vote request."""

    comment_id: str  # UUID string
    vote_type: str  # "helpful" or "not_helpful"
    user_id: str | None = None  # User ID from authenticated user


class CastCommentVoteResponse(BaseModel):
    """Cast comment vote response."""

    comment_id: str
    previous_vote: CommentVoteType | None
    user_vote: CommentVoteType | None
    delta: int
    net_count: int


class CastCommentVoteUseCase(BaseUseCase):
    """Use case for rating a comment helpful or not helpful."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast comment vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastCommentVoteRequest) -> CastCommentVoteResponse:
        """Execute cast comment vote flow.

        Raises:
            UnauthorizedError: If not authenticated
            ValidationError: If the vote type is not a comment reaction
            NotFoundError: If the comment does not exist
        """
        user_id = require_user(
            UserId(UUID(request.user_id)) if request.user_id else None,
            "rate comments",
        )

        try:
            vote_type = CommentVoteType(request.vote_type)
        except ValueError:
            raise ValidationError(f"Invalid comment vote type: {request.vote_type}")

        outcome = await self.vote_service.cast_comment_vote(
            user_id, CommentId(UUID(request.comment_id)), vote_type
        )

        return CastCommentVoteResponse(
            comment_id=request.comment_id,
            previous_vote=outcome.previous,
            user_vote=outcome.current,
            delta=outcome.delta,
            net_count=outcome.net_count,
        )
