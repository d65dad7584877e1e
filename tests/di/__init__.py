"""Mock providers for testing."""

from .persistence import MockPersistenceProvider, SharedInMemoryPersistenceProvider
from .sentiment import MockSentimentProvider
from .container import build_api_test_container, build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockSentimentProvider",
    "SharedInMemoryPersistenceProvider",
    "build_api_test_container",
    "build_test_container",
]
