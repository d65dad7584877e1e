"""Infrastructure providers."""

# Import bases
from .notifier import NotifierProvider
from .persistence import PersistenceProvider
from .sentiment import SentimentProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .sentiment import ProdSentimentProvider  # noqa: F401

__all__ = [
    "NotifierProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdSentimentProvider",
    "SentimentProvider",
]
