"""Vote use cases."""

from .cast_comment_vote import (
    CastCommentVoteRequest,
    CastCommentVoteResponse,
    CastCommentVoteUseCase,
)
from .cast_job_vote import CastJobVoteRequest, CastJobVoteResponse, CastJobVoteUseCase

__all__ = [
    "CastJobVoteRequest",
    "CastJobVoteResponse",
    "CastJobVoteUseCase",
    "CastCommentVoteRequest",
    "CastCommentVoteResponse",
    "CastCommentVoteUseCase",
]
