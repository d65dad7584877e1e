"""OpenAI sentiment classification adapter."""

from .classifier import (
    MockSentimentClassifier,
    OpenAISentimentClassifier,
)

__all__ = ["OpenAISentimentClassifier", "MockSentimentClassifier"]
