"""Base model for domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    """Timezone-aware current time; the database stores timestamptz."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Frozen entity model.

    Jobs, comments, votes and bookmarks are never mutated in place. Changes
    go through ``model_copy(update=...)`` and are written back by a
    repository, so a loaded entity always reflects one stored row.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
