"""Sentiment classification via the OpenAI chat completions API."""

import httpx
import logfire

from realjobs.adapter.error import ExternalServiceDegradedError, ProviderError
from realjobs.config import SentimentSettings
from realjobs.domain.service.moderation_service import SentimentClassifier
from realjobs.domain.value import Sentiment

SYSTEM_PROMPT = (
    "You are a sentiment analysis assistant. Analyze the sentiment of job "
    'posting comments and respond with ONLY one word: "positive", "negative", '
    'or "neutral". Consider comments about fake jobs, scams, or suspicious '
    "activity as negative."
)


class OpenAISentimentClassifier(SentimentClassifier):
    """Classifier backed by an OpenAI chat model.

    Answers outside the three labels are treated as neutral.
    """

    def __init__(
        self,
        settings: SentimentSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize OpenAI classifier.

        Args:
            settings: Sentiment settings (API key, model, timeout)
            transport: Optional httpx transport, used by tests
        """
        self.settings = settings
        self.transport = transport
        self.completions_url = f"{settings.base_url.rstrip('/')}/chat/completions"

    async def classify(self, text: str) -> Sentiment:
        """Classify comment text.

        Args:
            text: Comment content

        Returns:
            The sentiment

        Raises:
            ExternalServiceDegradedError: If no API key is configured or the
                API can't be reached
            ProviderError: If the API answers with an error
        """
        if not self.settings.api_key:
            raise ExternalServiceDegradedError("Sentiment API key not configured")

        payload = {
            "model": self.settings.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": (
                        "Analyze the sentiment of this comment about a job "
                        f'posting: "{text}"'
                    ),
                },
            ],
            "temperature": self.settings.temperature,
            "max_tokens": self.settings.max_tokens,
        }

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.completions_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.settings.api_key}"},
                    timeout=self.settings.timeout_seconds,
                )
        except httpx.HTTPError as e:
            logfire.error("Sentiment API HTTP error", error=str(e))
            raise ExternalServiceDegradedError(f"Sentiment API unreachable: {e}")

        if response.status_code != 200:
            logfire.error(
                "Sentiment API request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError(f"Sentiment API returned {response.status_code}")

        try:
            answer = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError):
            logfire.warn("Unexpected sentiment API response shape")
            return Sentiment.NEUTRAL

        sentiment = Sentiment.parse(answer)
        logfire.debug("Sentiment API answered", answer=answer, sentiment=sentiment.value)
        return sentiment


class MockSentimentClassifier(SentimentClassifier):
    """Mock classifier for testing.

    Deterministic keyword matching, no network calls.
    """

    NEGATIVE_WORDS = ("scam", "fake", "fraud", "suspicious", "ghost job", "avoid")
    POSITIVE_WORDS = ("legit", "great", "real", "hired", "recommend", "thanks")

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def classify(self, text: str) -> Sentiment:
        """Classify by keyword: negative words win over positive ones."""
        self.calls.append(text)
        lowered = text.lower()
        if any(word in lowered for word in self.NEGATIVE_WORDS):
            return Sentiment.NEGATIVE
        if any(word in lowered for word in self.POSITIVE_WORDS):
            return Sentiment.POSITIVE
        return Sentiment.NEUTRAL
