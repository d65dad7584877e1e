"""Bookmark entity."""

from datetime import datetime

from pydantic import Field

from realjobs.domain.model.common import DomainModel, utcnow
from realjobs.domain.value import JobId, UserId


class Bookmark(DomainModel):
    """A user's saved job posting. Unique per (user, job)."""

    user_id: UserId
    job_id: JobId
    created_at: datetime = Field(default_factory=utcnow)
