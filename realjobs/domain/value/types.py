"""Domain value objects for the job board.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import Field, field_validator

from realjobs.domain.value.common import ValueObject


class JobType(str, Enum):
    """Where the work happens."""

    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"


class JobStatus(str, Enum):
    """Lifecycle status of a job posting.

    Postings are never hard-deleted; they move out of ``active`` instead.
    """

    ACTIVE = "active"
    EXPIRED = "expired"
    FILLED = "filled"


class VoteType(str, Enum):
    """Legitimacy vote on a job posting."""

    UP = "up"
    DOWN = "down"

    @property
    def sign(self) -> int:
        """Contribution of one vote of this type to the net count."""
        return 1 if self is VoteType.UP else -1

    @property
    def opposite(self) -> "VoteType":
        return VoteType.DOWN if self is VoteType.UP else VoteType.UP


class CommentVoteType(str, Enum):
    """Reaction to a comment."""

    HELPFUL = "helpful"
    NOT_HELPFUL = "not_helpful"

    @property
    def sign(self) -> int:
        """Contribution of one reaction of this type to the net count."""
        return 1 if self is CommentVoteType.HELPFUL else -1

    @property
    def opposite(self) -> "CommentVoteType":
        return (
            CommentVoteType.NOT_HELPFUL
            if self is CommentVoteType.HELPFUL
            else CommentVoteType.HELPFUL
        )


class Sentiment(str, Enum):
    """Sentiment assigned to a comment when it is created."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"

    @classmethod
    def parse(cls, raw: str | None) -> "Sentiment":
        """Parse a classifier answer, falling back to neutral.

        Accepts surrounding whitespace, quotes and trailing punctuation
        ("Negative." -> NEGATIVE). Anything unrecognised is neutral.
        """
        if not raw:
            return cls.NEUTRAL
        cleaned = raw.strip().strip("\"'.!").lower()
        try:
            return cls(cleaned)
        except ValueError:
            return cls.NEUTRAL


class RankingMode(str, Enum):
    """Sort order for the job list."""

    HOT = "hot"
    NEW = "new"
    TOP = "top"
    FAKE = "fake"


class Badge(str, Enum):
    """Display badge derived from trust score and age."""

    COMMUNITY_VERIFIED = "Community Verified"
    SUSPICIOUS = "Suspicious"
    NEW = "NEW"
    TODAY = "TODAY"
    YESTERDAY = "YESTERDAY"
    THIS_WEEK = "THIS WEEK"


class BadgeColor(str, Enum):
    """Display color for a trust score."""

    GREEN = "green"
    BLUE = "blue"
    GRAY = "gray"
    RED = "red"
    YELLOW = "yellow"


class JobFilters(ValueObject):
    """Filters applied before ranking.

    Only active jobs are ever listed, so status is not a filter.
    """

    search: str | None = Field(default=None, max_length=200)
    category: str | None = None
    location: str | None = Field(default=None, max_length=100)
    job_type: JobType | None = None
    min_trust_score: int | None = None

    @field_validator("search", "category", "location")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """Treat empty query parameters as absent."""
        if v is None:
            return None
        v = v.strip()
        return v or None
