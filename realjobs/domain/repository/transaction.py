"""Transaction port."""

from abc import ABC, abstractmethod


class Transaction(ABC):
    """The unit of work shared by the repositories of one request.

    The request scope commits it when the request completes. Use cases
    commit earlier when a side effect outside the store must only happen
    once the writes are durable.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make the writes so far durable.

        Raises:
            Exception: Whatever the store raises; the request then rolls back
        """
        pass
