"""Comment entity.

Comments form a forest per job: ``parent_id`` links a reply to another
comment on the same job. Depth is not stored; it is derived when the
thread is assembled.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from realjobs.domain.model.common import DomainModel, utcnow
from realjobs.domain.value import CommentId, JobId, Sentiment, UserId


class Comment(DomainModel):
    """Comment on a job posting or reply to another comment.

    Sentiment is assigned once at creation and never changes.
    """

    id: CommentId
    job_id: JobId
    author_id: UserId
    content: str = Field(min_length=1, max_length=1000)
    parent_id: Optional[CommentId] = None
    sentiment: Sentiment = Sentiment.NEUTRAL
    created_at: datetime = Field(default_factory=utcnow)
