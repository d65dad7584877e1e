"""In-memory profile repository for testing."""

from typing import Optional

from realjobs.domain.model.profile import Profile
from realjobs.domain.repository.profile import ProfileRepository
from realjobs.domain.value import UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self.profiles: dict[UserId, Profile] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile of a user."""
        return self.profiles.get(user_id)

    async def find_by_username(self, username: str) -> Optional[Profile]:
        """Find a profile by username."""
        for profile in self.profiles.values():
            if profile.username == username:
                return profile
        return None

    async def insert_if_absent(self, profile: Profile) -> Profile:
        """Insert a profile unless the user already has one."""
        return self.profiles.setdefault(profile.id, profile)

    async def save(self, profile: Profile) -> Profile:
        """Update a profile, keeping stored karma and creation time."""
        existing = self.profiles.get(profile.id)
        if not existing:
            return profile
        updated = existing.model_copy(
            update={
                "username": profile.username,
                "avatar_url": profile.avatar_url,
                "bio": profile.bio,
                "updated_at": profile.updated_at,
            }
        )
        self.profiles[profile.id] = updated
        return updated
