"""Unit tests for CreateCommentUseCase."""

import asyncio
from uuid import UUID, uuid4

import pytest

from realjobs.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from realjobs.domain.error import NotFoundError, UnauthorizedError, ValidationError
from realjobs.domain.repository import JobRepository, Transaction, VoteRepository
from realjobs.domain.service import (
    CommentNotifier,
    CommentService,
    JobService,
    ModerationService,
    SentimentClassifier,
    VoteService,
)
from realjobs.domain.value import Sentiment, UserId, VoteType
from tests.conftest import make_job
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class LostConnectionTransaction(Transaction):
    async def commit(self) -> None:
        raise ConnectionError("connection to the database was lost")


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_negative_comment_casts_down_vote(self, unit_env):
        """A negative comment should be stored and count as a down vote."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        job_repo = await unit_env.get(JobRepository)
        vote_repo = await unit_env.get(VoteRepository)
        job = await job_repo.save(make_job())
        user_id = str(uuid4())

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                job_id=str(job.id),
                content="Total scam, they asked for my bank details",
                user_id=user_id,
            )
        )

        # Assert
        assert response.sentiment == Sentiment.NEGATIVE
        assert response.auto_downvoted is True
        assert (await vote_repo.tally(job.id)).negative == 1
        assert (await job_repo.find_by_id(job.id)).trust_score == -1

    @pytest.mark.asyncio
    async def test_neutral_comment_leaves_votes_alone(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        job_repo = await unit_env.get(JobRepository)
        vote_repo = await unit_env.get(VoteRepository)
        job = await job_repo.save(make_job())

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                job_id=str(job.id),
                content="Does anyone know the salary range?",
                user_id=str(uuid4()),
            )
        )

        # Assert
        assert response.sentiment == Sentiment.NEUTRAL
        assert response.auto_downvoted is False
        tally = await vote_repo.tally(job.id)
        assert (tally.positive, tally.negative) == (0, 0)

    @pytest.mark.asyncio
    async def test_prior_upvote_survives_negative_comment(self, unit_env):
        """An explicit up vote by the author should not be replaced."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        job_repo = await unit_env.get(JobRepository)
        vote_repo = await unit_env.get(VoteRepository)
        job = await job_repo.save(make_job())
        user_id = str(uuid4())
        vote_service = await unit_env.get(VoteService)
        await vote_service.cast_job_vote(UserId(UUID(user_id)), job.id, VoteType.UP)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                job_id=str(job.id), content="Seems fake to me", user_id=user_id
            )
        )

        # Assert
        assert response.auto_downvoted is False
        vote = await vote_repo.find_by_user_and_job(UserId(UUID(user_id)), job.id)
        assert vote.vote_type == VoteType.UP

    @pytest.mark.asyncio
    async def test_comment_is_published_to_subscribers(self, unit_env):
        """Live subscribers of the job should receive the new comment."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        notifier = await unit_env.get(CommentNotifier)
        job_repo = await unit_env.get(JobRepository)
        job = await job_repo.save(make_job())
        stream = notifier.subscribe(job.id)
        next_comment = asyncio.ensure_future(stream.__anext__())
        await asyncio.sleep(0)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                job_id=str(job.id), content="Interviewed here", user_id=str(uuid4())
            )
        )

        # Assert
        received = await asyncio.wait_for(next_comment, timeout=1)
        assert str(received.id) == response.comment_id
        assert (await unit_env.get(Transaction)).commits == 1
        await stream.aclose()

    @pytest.mark.asyncio
    async def test_failed_commit_publishes_nothing(self, unit_env):
        """If the commit fails, subscribers never hear about the comment."""
        # Arrange
        notifier = await unit_env.get(CommentNotifier)
        job_repo = await unit_env.get(JobRepository)
        use_case = CreateCommentUseCase(
            comment_service=await unit_env.get(CommentService),
            job_service=await unit_env.get(JobService),
            moderation_service=await unit_env.get(ModerationService),
            comment_notifier=notifier,
            transaction=LostConnectionTransaction(),
        )
        job = await job_repo.save(make_job())
        stream = notifier.subscribe(job.id)
        next_comment = asyncio.ensure_future(stream.__anext__())
        await asyncio.sleep(0)

        # Act
        with pytest.raises(ConnectionError):
            await use_case.execute(
                CreateCommentRequest(
                    job_id=str(job.id), content="Interviewed here", user_id=str(uuid4())
                )
            )
        await asyncio.sleep(0)

        # Assert
        assert not next_comment.done()
        next_comment.cancel()
        await asyncio.gather(next_comment, return_exceptions=True)
        await stream.aclose()

    @pytest.mark.asyncio
    async def test_classifier_sees_stripped_content(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        classifier = await unit_env.get(SentimentClassifier)
        job_repo = await unit_env.get(JobRepository)
        job = await job_repo.save(make_job())

        # Act
        await use_case.execute(
            CreateCommentRequest(
                job_id=str(job.id), content="   padded   ", user_id=str(uuid4())
            )
        )

        # Assert
        assert classifier.calls[-1] == "padded"

    @pytest.mark.asyncio
    async def test_anonymous_user_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(
                CreateCommentRequest(job_id=str(uuid4()), content="Hello there")
            )

    @pytest.mark.asyncio
    async def test_missing_job_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    job_id=str(uuid4()), content="Hello there", user_id=str(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_too_long_comment_is_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        job_repo = await unit_env.get(JobRepository)
        job = await job_repo.save(make_job())

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    job_id=str(job.id), content="x" * 501, user_id=str(uuid4())
                )
            )
