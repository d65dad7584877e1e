"""User profile."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from realjobs.domain.model.common import DomainModel, utcnow
from realjobs.domain.value import UserId


class Profile(DomainModel):
    """Public profile of a community member.

    Keyed by the auth provider's user ID. Created the first time the user
    submits a job or edits their profile. ``karma_points`` is stored with
    the profile and is not changed by profile edits.
    """

    id: UserId
    username: str = Field(min_length=1, max_length=30)
    avatar_url: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    karma_points: int = 0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
