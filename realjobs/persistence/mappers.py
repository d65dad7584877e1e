"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from realjobs.domain.model import (
    Bookmark,
    Comment,
    CommentVote,
    JobPosting,
    Profile,
    Vote,
)
from realjobs.domain.value import (
    CommentId,
    CommentVoteId,
    CommentVoteType,
    JobId,
    JobStatus,
    JobType,
    Sentiment,
    UserId,
    VoteId,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_job(row: Dict[str, Any]) -> JobPosting:
    """Convert database row to JobPosting domain model.

    Args:
        row: Database row as dict

    Returns:
        JobPosting domain model
    """
    return JobPosting(
        id=JobId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        url=row["url"],
        title=row["title"],
        company=row["company"],
        description=row.get("description"),
        category=row.get("category"),
        location=row.get("location"),
        job_type=JobType(row["job_type"]),
        status=JobStatus(row["status"]),
        trust_score=row["trust_score"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def job_to_dict(job: JobPosting) -> Dict[str, Any]:
    """Convert JobPosting domain model to database dict.

    Args:
        job: JobPosting domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = job.model_dump()
    data["job_type"] = job.job_type.value
    data["status"] = job.status.value
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        job_id=JobId(_uuid(row["job_posting_id"])),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "id": vote.id,
        "user_id": vote.user_id,
        "job_posting_id": vote.job_id,
        "vote_type": vote.vote_type.value,
        "created_at": vote.created_at,
    }


def row_to_comment_vote(row: Dict[str, Any]) -> CommentVote:
    """Convert database row to CommentVote domain model."""
    return CommentVote(
        id=CommentVoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        vote_type=CommentVoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def comment_vote_to_dict(vote: CommentVote) -> Dict[str, Any]:
    """Convert CommentVote domain model to database dict."""
    return {
        "id": vote.id,
        "user_id": vote.user_id,
        "comment_id": vote.comment_id,
        "vote_type": vote.vote_type.value,
        "created_at": vote.created_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        job_id=JobId(_uuid(row["job_posting_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        sentiment=Sentiment(row["sentiment"]),
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": comment.id,
        "job_posting_id": comment.job_id,
        "parent_id": comment.parent_id,
        "author_id": comment.author_id,
        "content": comment.content,
        "sentiment": comment.sentiment.value,
        "created_at": comment.created_at,
    }


def row_to_bookmark(row: Dict[str, Any]) -> Bookmark:
    """Convert database row to Bookmark domain model."""
    return Bookmark(
        user_id=UserId(_uuid(row["user_id"])),
        job_id=JobId(_uuid(row["job_posting_id"])),
        created_at=row["created_at"],
    )


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        avatar_url=row.get("avatar_url"),
        bio=row.get("bio"),
        karma_points=row["karma_points"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return profile.model_dump()
