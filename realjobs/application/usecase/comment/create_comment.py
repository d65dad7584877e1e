"""Create comment use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from realjobs.application.usecase.base import BaseUseCase, require_user
from realjobs.domain.repository import Transaction
from realjobs.domain.service import (
    CommentNotifier,
    CommentService,
    JobService,
    ModerationService,
)
from realjobs.domain.value import CommentId, JobId, Sentiment, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    job_id: str  # UUID string
    content: str
    parent_id: str | None = None  # Parent comment ID for replies
    user_id: str | None = None  # User ID from authenticated user


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    job_id: str
    parent_id: str | None
    content: str
    sentiment: Sentiment
    auto_downvoted: bool
    created_at: datetime


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a job, with sentiment moderation."""

    def __init__(
        self,
        comment_service: CommentService,
        job_service: JobService,
        moderation_service: ModerationService,
        comment_notifier: CommentNotifier,
        transaction: Transaction,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            job_service: Job domain service
            moderation_service: Sentiment moderation service
            comment_notifier: Realtime fan-out of new comments
            transaction: Request transaction, committed before fan-out
        """
        self.comment_service = comment_service
        self.job_service = job_service
        self.moderation_service = moderation_service
        self.comment_notifier = comment_notifier
        self.transaction = transaction

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Require an authenticated user
        2. Validate content
        3. Verify the job exists
        4. Classify sentiment (neutral if the classifier is unavailable)
        5. Store the comment with its sentiment
        6. Cast an automatic down vote for negative comments
        7. Commit, then notify live subscribers

        Args:
            request: Create comment request

        Returns:
            The comment, its sentiment and whether a down vote was cast

        Raises:
            UnauthorizedError: If not authenticated
            ValidationError: If content is invalid or the thread is too deep
            NotFoundError: If the job does not exist
        """
        user_id = require_user(
            UserId(UUID(request.user_id)) if request.user_id else None,
            "comment",
        )
        content = self.comment_service.validate_content(request.content)
        job = await self.job_service.get_job(JobId(UUID(request.job_id)))

        sentiment = await self.moderation_service.classify(content)

        comment = await self.comment_service.create_comment(
            job_id=job.id,
            author_id=user_id,
            content=content,
            sentiment=sentiment,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
        )

        auto_downvoted = await self.moderation_service.moderate(
            user_id, job.id, sentiment
        )

        # Subscribers only ever see comments that are stored
        await self.transaction.commit()

        try:
            await self.comment_notifier.publish(comment)
        except Exception as e:
            # The comment is stored; live delivery is best effort
            logfire.warn(
                "Failed to publish comment", comment_id=str(comment.id), error=str(e)
            )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            job_id=str(comment.job_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            content=comment.content,
            sentiment=comment.sentiment,
            auto_downvoted=auto_downvoted,
            created_at=comment.created_at,
        )
