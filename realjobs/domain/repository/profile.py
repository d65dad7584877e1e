"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from realjobs.domain.model.profile import Profile
from realjobs.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for user profiles."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile of a user."""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[Profile]:
        """Find a profile by username (exact match).

        Args:
            username: Public username

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert_if_absent(self, profile: Profile) -> Profile:
        """Store a profile unless the user already has one.

        Returns:
            The stored profile: the new one, or the one that already existed
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Update username, avatar and bio of an existing profile.

        ``karma_points`` and ``created_at`` keep their stored values.
        """
        pass
