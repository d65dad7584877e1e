"""Job posting aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from realjobs.domain.model.common import DomainModel, utcnow
from realjobs.domain.value import JobId, JobStatus, JobType, UserId


class JobPosting(DomainModel):
    """Job posting submitted by a community member.

    ``trust_score`` is a cached projection of the vote ledger (upvotes minus
    downvotes). It is only ever written by recomputing from the ledger.
    """

    id: JobId
    owner_id: UserId
    url: str = Field(min_length=1, max_length=2048)
    title: str = Field(min_length=5, max_length=200)
    company: str = Field(min_length=2, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    category: Optional[str] = Field(default=None, max_length=50)
    location: Optional[str] = Field(default=None, max_length=100)
    job_type: JobType = JobType.ONSITE
    status: JobStatus = JobStatus.ACTIVE
    trust_score: int = 0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_active(self) -> bool:
        return self.status == JobStatus.ACTIVE
