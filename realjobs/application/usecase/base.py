"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from realjobs.domain.error import UnauthorizedError
from realjobs.domain.value import UserId


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def require_user(user_id: UserId | None, action: str) -> UserId:
    """Return the authenticated user's ID or refuse the action.

    Raises:
        UnauthorizedError: If there is no authenticated user
    """
    if user_id is None:
        raise UnauthorizedError(action)
    return user_id
