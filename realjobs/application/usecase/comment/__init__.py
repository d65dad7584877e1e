"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .get_comments import (
    CommentNodeResponse,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)

__all__ = [
    "CommentNodeResponse",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
]
