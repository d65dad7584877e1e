"""Realtime comment notification port."""

from abc import ABC, abstractmethod
from typing import AsyncIterator

from realjobs.domain.model.comment import Comment
from realjobs.domain.value import JobId


class CommentNotifier(ABC):
    """Fan-out of newly created comments to live subscribers."""

    @abstractmethod
    async def publish(self, comment: Comment) -> None:
        """Deliver a new comment to everyone watching its job."""
        pass

    @abstractmethod
    def subscribe(self, job_id: JobId) -> AsyncIterator[Comment]:
        """Stream comments created on a job from now on.

        The iterator unsubscribes when closed.
        """
        pass
