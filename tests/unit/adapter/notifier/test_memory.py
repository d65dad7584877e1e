"""Unit tests for the in-process comment notifier."""

import asyncio
from uuid import uuid4

import pytest

from realjobs.adapter.notifier import InMemoryCommentNotifier
from realjobs.domain.value import JobId
from tests.conftest import make_comment


async def start(stream) -> asyncio.Future:
    """Begin waiting on a subscription so it is registered."""
    pending = asyncio.ensure_future(stream.__anext__())
    await asyncio.sleep(0)
    return pending


class TestInMemoryCommentNotifier:
    """Tests for InMemoryCommentNotifier."""

    @pytest.mark.asyncio
    async def test_subscriber_receives_comments_for_its_job(self):
        # Arrange
        notifier = InMemoryCommentNotifier()
        job_id = JobId(uuid4())
        stream = notifier.subscribe(job_id)
        pending = await start(stream)

        # Act
        comment = make_comment(job_id)
        await notifier.publish(comment)

        # Assert
        assert await asyncio.wait_for(pending, timeout=1) == comment
        await stream.aclose()

    @pytest.mark.asyncio
    async def test_other_jobs_are_not_delivered(self):
        # Arrange
        notifier = InMemoryCommentNotifier()
        job_id = JobId(uuid4())
        stream = notifier.subscribe(job_id)
        pending = await start(stream)

        # Act
        await notifier.publish(make_comment(JobId(uuid4())))
        await asyncio.sleep(0)

        # Assert
        assert not pending.done()
        pending.cancel()
        await asyncio.gather(pending, return_exceptions=True)
        await stream.aclose()

    @pytest.mark.asyncio
    async def test_closing_stream_unsubscribes(self):
        # Arrange
        notifier = InMemoryCommentNotifier()
        job_id = JobId(uuid4())
        stream = notifier.subscribe(job_id)
        pending = await start(stream)
        assert notifier.subscriber_count(job_id) == 1

        # Act
        pending.cancel()
        await asyncio.gather(pending, return_exceptions=True)
        await stream.aclose()

        # Assert
        assert notifier.subscriber_count(job_id) == 0

    @pytest.mark.asyncio
    async def test_full_queue_drops_instead_of_blocking(self):
        # Arrange
        notifier = InMemoryCommentNotifier(max_queue_size=1)
        job_id = JobId(uuid4())
        stream = notifier.subscribe(job_id)
        pending = await start(stream)
        first, second, third = (make_comment(job_id) for _ in range(3))

        # Act
        await notifier.publish(first)
        received_first = await asyncio.wait_for(pending, timeout=1)
        await notifier.publish(second)
        await notifier.publish(third)

        # Assert
        assert received_first == first
        assert await asyncio.wait_for(stream.__anext__(), timeout=1) == second
        await stream.aclose()

    @pytest.mark.asyncio
    async def test_publish_without_subscribers_is_noop(self):
        notifier = InMemoryCommentNotifier()

        await notifier.publish(make_comment(JobId(uuid4())))

        assert notifier.subscriber_count(JobId(uuid4())) == 0
