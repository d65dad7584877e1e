"""Comment domain service and thread builder."""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Sequence
from uuid import uuid4

import logfire

from realjobs.config import CommentSettings
from realjobs.domain.error import ValidationError
from realjobs.domain.model.comment import Comment
from realjobs.domain.repository import CommentRepository
from realjobs.domain.value import CommentId, JobId, Sentiment, UserId

from .base import Service


@dataclass
class CommentNode:
    """Node in a job's comment thread.

    Depth is counted from the root (0). Replies are ordered newest first.
    """

    comment: Comment
    depth: int
    can_reply: bool
    replies: list["CommentNode"] = field(default_factory=list)


def can_reply(depth: int, max_reply_depth: int = 3) -> bool:
    """Whether a comment at this depth accepts replies."""
    return depth < max_reply_depth


def _newest_first(comments: Iterable[Comment]) -> list[Comment]:
    ordered = sorted(comments, key=lambda c: str(c.id))
    ordered.sort(key=lambda c: c.created_at, reverse=True)
    return ordered


def _in_cycle(comment: Comment, by_id: dict[CommentId, Comment]) -> bool:
    """Whether following parent links from ``comment`` leads back to it."""
    seen: set[CommentId] = set()
    current = comment
    while current.parent_id is not None and current.parent_id in by_id:
        if current.parent_id == comment.id:
            return True
        if current.parent_id in seen:
            # Entered a loop that doesn't include this comment
            return False
        seen.add(current.parent_id)
        current = by_id[current.parent_id]
    return False


def build_comment_tree(
    comments: Sequence[Comment], max_reply_depth: int = 3
) -> list[CommentNode]:
    """Assemble a flat list of comments into a thread.

    Algorithm:
    1. Index comments by id
    2. Attach each comment to its parent when the parent is present, on
       the same job and not part of a loop through the comment. Anything
       else becomes a root.
    3. Walk down from the roots assigning depths, newest first at every
       level

    Never raises: broken parent links degrade to extra roots.

    Args:
        comments: Comments of a single job, in any order
        max_reply_depth: Depth at which replies are no longer accepted

    Returns:
        Root nodes with replies populated
    """
    by_id: dict[CommentId, Comment] = {c.id: c for c in comments}

    children: dict[CommentId, list[Comment]] = defaultdict(list)
    roots: list[Comment] = []
    for comment in by_id.values():
        parent = by_id.get(comment.parent_id) if comment.parent_id else None
        if (
            parent is None
            or parent.job_id != comment.job_id
            or _in_cycle(comment, by_id)
        ):
            roots.append(comment)
        else:
            children[parent.id].append(comment)

    def make_node(comment: Comment, depth: int) -> CommentNode:
        return CommentNode(
            comment=comment,
            depth=depth,
            can_reply=can_reply(depth, max_reply_depth),
        )

    # Iterative walk so arbitrarily deep chains can't hit the recursion limit
    tree = [make_node(c, 0) for c in _newest_first(roots)]
    stack = list(tree)
    while stack:
        node = stack.pop()
        for child in _newest_first(children.get(node.comment.id, [])):
            child_node = make_node(child, node.depth + 1)
            node.replies.append(child_node)
            stack.append(child_node)

    return tree


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            comment_settings: Length and depth limits
        """
        self.comment_repository = comment_repository
        self.settings = comment_settings

    def validate_content(self, content: str) -> str:
        """Strip and length-check comment text.

        Returns:
            The stripped content

        Raises:
            ValidationError: If empty or too long
        """
        stripped = content.strip()
        if not stripped:
            raise ValidationError("Comment cannot be empty")
        if len(stripped) > self.settings.max_length:
            raise ValidationError(
                f"Comment must be at most {self.settings.max_length} characters"
            )
        return stripped

    async def create_comment(
        self,
        job_id: JobId,
        author_id: UserId,
        content: str,
        sentiment: Sentiment,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a job or a reply to another comment.

        A parent that doesn't exist or belongs to another job is dropped
        and the comment is stored as a root.

        Args:
            job_id: Job ID
            author_id: Author user ID
            content: Comment text
            sentiment: Sentiment assigned by moderation
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is invalid or the parent is too deep
        """
        with logfire.span(
            "comment_service.create_comment",
            job_id=str(job_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            content = self.validate_content(content)

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent or parent.job_id != job_id:
                    logfire.warn(
                        "Dropping invalid parent, storing as root",
                        parent_id=str(parent_id),
                        job_id=str(job_id),
                    )
                    parent_id = None
                elif await self._depth_of(parent) >= self.settings.max_reply_depth:
                    raise ValidationError("Maximum reply depth reached")

            comment = Comment(
                id=CommentId(uuid4()),
                job_id=job_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                sentiment=sentiment,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                job_id=str(job_id),
                sentiment=sentiment.value,
            )
            return saved

    async def _depth_of(self, comment: Comment) -> int:
        """Depth of a stored comment, counted up to the reply limit."""
        depth = 0
        seen = {comment.id}
        current = comment
        while current.parent_id and depth < self.settings.max_reply_depth:
            parent = await self.comment_repository.find_by_id(current.parent_id)
            if not parent or parent.job_id != current.job_id or parent.id in seen:
                break
            seen.add(parent.id)
            depth += 1
            current = parent
        return depth

    async def get_comments_for_job(self, job_id: JobId) -> list[Comment]:
        """Get all comments on a job as a flat list.

        Args:
            job_id: Job ID

        Returns:
            Comments, newest first
        """
        with logfire.span("comment_service.get_comments_for_job", job_id=str(job_id)):
            comments = await self.comment_repository.find_by_job(job_id)
            logfire.info(
                "Comments retrieved for job", job_id=str(job_id), count=len(comments)
            )
            return _newest_first(comments)

    async def get_comment_thread(self, job_id: JobId) -> list[CommentNode]:
        """Get a job's comments assembled into a thread."""
        comments = await self.get_comments_for_job(job_id)
        return build_comment_tree(comments, self.settings.max_reply_depth)
