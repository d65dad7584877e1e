"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from realjobs.application.usecase.base import BaseUseCase
from realjobs.domain.service import CommentNode, CommentService, VoteService
from realjobs.domain.value import CommentId, CommentVoteType, JobId, Sentiment, UserId


class CommentNodeResponse(BaseModel):
    """Comment thread node for API response, mirroring the domain thread."""

    comment_id: str
    job_id: str
    author_id: str
    parent_id: str | None
    content: str
    sentiment: Sentiment
    depth: int
    can_reply: bool
    net_count: int
    user_vote: CommentVoteType | None
    created_at: datetime
    replies: list["CommentNodeResponse"]

    @classmethod
    def from_domain(
        cls,
        node: CommentNode,
        net_counts: dict[CommentId, int],
        user_votes: dict[CommentId, CommentVoteType],
    ) -> "CommentNodeResponse":
        """Convert a domain thread node to the response model.

        Replies are converted bottom-up with an explicit stack, so the
        length of a reply chain is not bounded by the recursion limit.

        Args:
            node: Domain comment node
            net_counts: Net reaction count per comment
            user_votes: Current user's reaction per comment

        Returns:
            API response model with replies converted
        """
        converted: dict[CommentId, CommentNodeResponse] = {}
        stack: list[tuple[CommentNode, bool]] = [(node, False)]
        while stack:
            current, replies_done = stack.pop()
            if not replies_done:
                stack.append((current, True))
                stack.extend((reply, False) for reply in current.replies)
                continue

            comment = current.comment
            converted[comment.id] = cls(
                comment_id=str(comment.id),
                job_id=str(comment.job_id),
                author_id=str(comment.author_id),
                parent_id=str(comment.parent_id) if comment.parent_id else None,
                content=comment.content,
                sentiment=comment.sentiment,
                depth=current.depth,
                can_reply=current.can_reply,
                net_count=net_counts.get(comment.id, 0),
                user_vote=user_votes.get(comment.id),
                created_at=comment.created_at,
                replies=[converted.pop(reply.comment.id) for reply in current.replies],
            )

        return converted[node.comment.id]


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    job_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    job_id: str
    comments: list[CommentNodeResponse]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for getting a job's comment thread."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            vote_service: Vote service for reaction counts and user votes
        """
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Job ID and optional current user

        Returns:
            Comment thread with reaction counts and the user's reactions
        """
        job_id = JobId(UUID(request.job_id))
        thread = await self.comment_service.get_comment_thread(job_id)

        comment_ids: list[CommentId] = []
        pending = list(thread)
        while pending:
            node = pending.pop()
            comment_ids.append(node.comment.id)
            pending.extend(node.replies)

        # Batch queries for every comment in the thread (avoid N+1)
        net_counts = await self.vote_service.get_comment_net_counts(comment_ids)
        user_votes: dict[CommentId, CommentVoteType] = {}
        if request.user_id and comment_ids:
            user_votes = await self.vote_service.get_user_votes_for_comments(
                UserId(UUID(request.user_id)), comment_ids
            )

        return GetCommentsResponse(
            job_id=request.job_id,
            comments=[
                CommentNodeResponse.from_domain(node, net_counts, user_votes)
                for node in thread
            ],
            total=len(comment_ids),
        )
