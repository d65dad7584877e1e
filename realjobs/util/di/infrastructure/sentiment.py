"""Sentiment classifier infrastructure providers."""

from dishka import Scope, provide

from realjobs.adapter.openai import OpenAISentimentClassifier
from realjobs.config import SentimentSettings
from realjobs.domain.service import SentimentClassifier
from realjobs.util.di.base import ProviderBase


class SentimentProvider(ProviderBase):
    """Sentiment component base."""

    __mock_component__ = "sentiment"


class ProdSentimentProvider(SentimentProvider):
    """Production sentiment provider calling the OpenAI API.

    Without an API key the classifier degrades every comment to neutral
    instead of failing startup.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_sentiment_classifier(
        self, sentiment_settings: SentimentSettings
    ) -> SentimentClassifier:
        """Provide OpenAI sentiment classifier."""
        return OpenAISentimentClassifier(settings=sentiment_settings)
