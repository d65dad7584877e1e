"""In-memory transaction for testing."""

from realjobs.domain.repository import Transaction


class InMemoryTransaction(Transaction):
    """Counts commits; in-memory writes are visible immediately."""

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1
