"""Sentiment-triggered moderation.

Every new comment is classified. A negative comment counts as a down vote
from its author, unless the author already voted on the job.
"""

import asyncio
from abc import ABC, abstractmethod
from uuid import uuid4

import logfire

from realjobs.adapter.error import ExternalServiceDegradedError
from realjobs.config import SentimentSettings
from realjobs.domain.model.vote import Vote
from realjobs.domain.repository import VoteRepository
from realjobs.domain.value import JobId, Sentiment, UserId, VoteId, VoteType

from .base import Service
from .trust_service import TrustService


class SentimentClassifier(ABC):
    """Port for the comment sentiment classifier."""

    @abstractmethod
    async def classify(self, text: str) -> Sentiment:
        """Classify comment text.

        Args:
            text: Comment content

        Returns:
            The sentiment

        Raises:
            ExternalServiceDegradedError: If the classifier is unavailable
        """
        pass


class ModerationService(Service):
    """Domain service applying sentiment to the vote ledger."""

    def __init__(
        self,
        classifier: SentimentClassifier,
        vote_repository: VoteRepository,
        trust_service: TrustService,
        sentiment_settings: SentimentSettings,
    ) -> None:
        """Initialize moderation service.

        Args:
            classifier: Sentiment classifier
            vote_repository: Vote repository
            trust_service: Trust score service
            sentiment_settings: Classifier timeout
        """
        self.classifier = classifier
        self.vote_repository = vote_repository
        self.trust_service = trust_service
        self.settings = sentiment_settings

    async def classify(self, text: str) -> Sentiment:
        """Classify text, degrading to neutral.

        Comment creation never fails because of the classifier: timeouts,
        provider errors and malformed answers all yield NEUTRAL.

        Args:
            text: Comment content

        Returns:
            The sentiment
        """
        with logfire.span("moderation_service.classify", text_length=len(text)):
            try:
                sentiment = await asyncio.wait_for(
                    self.classifier.classify(text),
                    timeout=self.settings.timeout_seconds,
                )
            except asyncio.TimeoutError:
                logfire.warn(
                    "Sentiment classification timed out",
                    timeout_seconds=self.settings.timeout_seconds,
                )
                return Sentiment.NEUTRAL
            except ExternalServiceDegradedError as e:
                logfire.warn("Sentiment classifier unavailable", error=str(e))
                return Sentiment.NEUTRAL
            except Exception as e:
                logfire.error(
                    "Sentiment classification failed",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return Sentiment.NEUTRAL

            logfire.info("Comment classified", sentiment=sentiment.value)
            return sentiment

    async def moderate(
        self, user_id: UserId, job_id: JobId, sentiment: Sentiment
    ) -> bool:
        """Cast an automatic down vote for a negative comment.

        Only inserts when the user has no vote on the job; an explicit
        vote of either type is left alone.

        Args:
            user_id: Comment author
            job_id: Job commented on
            sentiment: Sentiment of the comment

        Returns:
            True if a down vote was cast
        """
        if sentiment != Sentiment.NEGATIVE:
            return False

        with logfire.span(
            "moderation_service.moderate", job_id=str(job_id), user_id=str(user_id)
        ):
            inserted = await self.vote_repository.insert_if_absent(
                Vote(
                    id=VoteId(uuid4()),
                    user_id=user_id,
                    job_id=job_id,
                    vote_type=VoteType.DOWN,
                )
            )
            if inserted:
                score = await self.trust_service.refresh_trust_score(job_id)
                logfire.info(
                    "Automatic down vote cast",
                    job_id=str(job_id),
                    user_id=str(user_id),
                    trust_score=score,
                )
            else:
                logfire.info(
                    "User already voted, automatic down vote skipped",
                    job_id=str(job_id),
                    user_id=str(user_id),
                )
            return inserted
