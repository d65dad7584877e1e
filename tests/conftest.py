"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire
import pytest

from realjobs.config import AuthSettings
from realjobs.domain.model import Comment, JobPosting
from realjobs.domain.value import CommentId, JobId, Sentiment, UserId
from realjobs.util.jwt import create_token

# Console-only telemetry; nothing leaves the test process
logfire.configure(send_to_logfire=False, console=False)


NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_job(
    title: str = "Senior Python Engineer",
    company: str = "Acme Corp",
    age: timedelta = timedelta(hours=1),
    now: datetime = NOW,
    **fields,
) -> JobPosting:
    """Build a job posting created ``age`` before ``now``."""
    created_at = now - age
    values = {
        "id": JobId(uuid4()),
        "owner_id": UserId(uuid4()),
        "url": "https://careers.example.com/jobs/123",
        "title": title,
        "company": company,
        "created_at": created_at,
        "updated_at": created_at,
    }
    values.update(fields)
    return JobPosting(**values)


def make_comment(
    job_id: JobId,
    content: str = "Applied last week, got a reply",
    parent_id: CommentId | None = None,
    created_at: datetime = NOW,
    **fields,
) -> Comment:
    """Build a comment on a job."""
    values = {
        "id": CommentId(uuid4()),
        "job_id": job_id,
        "author_id": UserId(uuid4()),
        "content": content,
        "parent_id": parent_id,
        "sentiment": Sentiment.NEUTRAL,
        "created_at": created_at,
    }
    values.update(fields)
    return Comment(**values)


def make_token(user_id: UserId | None = None, email: str = "user@example.com") -> str:
    """Issue a token signed with the default test secret."""
    return create_token(str(user_id or uuid4()), email, AuthSettings())


@pytest.fixture
def user_id() -> UserId:
    return UserId(uuid4())
