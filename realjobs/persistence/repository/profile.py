"""PostgreSQL implementation of Profile repository."""

from typing import Optional

import logfire
from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from realjobs.domain.model import Profile
from realjobs.domain.repository import ProfileRepository
from realjobs.domain.value import UserId
from realjobs.persistence.mappers import profile_to_dict, row_to_profile
from realjobs.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile of a user."""
        stmt = select(profiles_table).where(profiles_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def find_by_username(self, username: str) -> Optional[Profile]:
        """Find a profile by username."""
        with logfire.span("profile_repository.find_by_username", username=username):
            stmt = select(profiles_table).where(profiles_table.c.username == username)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.debug("Profile not found", username=username)
                return None

            return row_to_profile(row._asdict())

    async def insert_if_absent(self, profile: Profile) -> Profile:
        """Insert a profile, keeping any profile the user already has."""
        stmt = (
            insert(profiles_table)
            .values(**profile_to_dict(profile))
            .on_conflict_do_nothing(index_elements=[profiles_table.c.id])
            .returning(profiles_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.fetchone()
        if row:
            logfire.info(
                "Profile created", user_id=str(profile.id), username=profile.username
            )
            return row_to_profile(row._asdict())

        existing = await self.find_by_id(profile.id)
        return existing or profile

    async def save(self, profile: Profile) -> Profile:
        """Update the editable fields of a profile."""
        stmt = (
            update(profiles_table)
            .where(profiles_table.c.id == profile.id)
            .values(
                username=profile.username,
                avatar_url=profile.avatar_url,
                bio=profile.bio,
                updated_at=profile.updated_at,
            )
            .returning(profiles_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else profile
