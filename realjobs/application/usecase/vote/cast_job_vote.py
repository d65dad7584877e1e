"""Cast job vote use case."""

from uuid import UUID

from pydantic import BaseModel

from realjobs.application.usecase.base import BaseUseCase, require_user
from realjobs.domain.error import ValidationError
from realjobs.domain.service import VoteService
from realjobs.domain.value import JobId, UserId, VoteType


class CastJobVoteRequest(BaseModel):
    """Cast job vote request."""

    job_id: str  # UUID string
    vote_type: str  # "up" or "down"
    user_id: str | None = None  # User ID from authenticated user


class CastJobVoteResponse(BaseModel):
    """Cast job vote response."""

    job_id: str
    previous_vote: VoteType | None
    user_vote: VoteType | None  # None when the vote was toggled off
    delta: int
    trust_score: int


class CastJobVoteUseCase(BaseUseCase):
    """Use case for voting a job legitimate (up) or fake (down)."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast job vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastJobVoteRequest) -> CastJobVoteResponse:
        """Execute cast job vote flow.

        Voting the same way twice removes the vote; voting the other way
        swings it.

        Args:
            request: Job, vote type and voting user

        Returns:
            The vote state after the cast and the recomputed trust score

        Raises:
            UnauthorizedError: If not authenticated
            ValidationError: If the vote type is not a job vote
            NotFoundError: If the job does not exist
        """
        user_id = require_user(
            UserId(UUID(request.user_id)) if request.user_id else None,
            "vote",
        )

        try:
            vote_type = VoteType(request.vote_type)
        except ValueError:
            raise ValidationError(f"Invalid vote type: {request.vote_type}")

        outcome = await self.vote_service.cast_job_vote(
            user_id, JobId(UUID(request.job_id)), vote_type
        )

        return CastJobVoteResponse(
            job_id=request.job_id,
            previous_vote=outcome.previous,
            user_vote=outcome.current,
            delta=outcome.delta,
            trust_score=outcome.net_count,
        )
