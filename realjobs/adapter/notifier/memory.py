"""In-process comment broker.

Fans new comments out to subscribers of the same job through asyncio
queues. State is per process; with several workers each only sees the
comments it created.
"""

import asyncio
from collections import defaultdict
from typing import AsyncIterator

import logfire

from realjobs.domain.model.comment import Comment
from realjobs.domain.service.notifier import CommentNotifier
from realjobs.domain.value import JobId


class InMemoryCommentNotifier(CommentNotifier):
    """Comment notifier backed by per-subscriber asyncio queues."""

    def __init__(self, max_queue_size: int = 100) -> None:
        """Initialize notifier.

        Args:
            max_queue_size: Comments buffered per subscriber before drops
        """
        self.max_queue_size = max_queue_size
        self._subscribers: dict[JobId, set[asyncio.Queue[Comment]]] = defaultdict(set)

    def subscriber_count(self, job_id: JobId) -> int:
        """Number of live subscribers on a job."""
        return len(self._subscribers.get(job_id, ()))

    async def publish(self, comment: Comment) -> None:
        """Deliver a comment to every subscriber of its job.

        Slow subscribers with a full queue miss the comment.
        """
        for queue in list(self._subscribers.get(comment.job_id, ())):
            try:
                queue.put_nowait(comment)
            except asyncio.QueueFull:
                logfire.warn(
                    "Subscriber queue full, dropping comment",
                    job_id=str(comment.job_id),
                    comment_id=str(comment.id),
                )

    async def subscribe(self, job_id: JobId) -> AsyncIterator[Comment]:
        """Stream comments created on a job from now on."""
        queue: asyncio.Queue[Comment] = asyncio.Queue(maxsize=self.max_queue_size)
        self._subscribers[job_id].add(queue)
        logfire.info("Comment stream opened", job_id=str(job_id))
        try:
            while True:
                yield await queue.get()
        finally:
            self._subscribers[job_id].discard(queue)
            if not self._subscribers[job_id]:
                del self._subscribers[job_id]
            logfire.info("Comment stream closed", job_id=str(job_id))
