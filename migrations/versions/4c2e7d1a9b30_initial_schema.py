"""initial_schema

Create the schema for Real Job Postings:
- Job postings (with cached trust score)
- Votes (legitimacy up/down, one per user and job)
- Comments (threaded replies, sentiment assigned at creation)
- Comment votes (helpful/not helpful, one per user and comment)
- Bookmarks

Users live with the external auth provider; user IDs are plain UUIDs.

Revision ID: 4c2e7d1a9b30
Revises:
Create Date: 2025-06-01 12:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "4c2e7d1a9b30"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ENUM_TYPES = {
    "job_type": ("remote", "hybrid", "onsite"),
    "job_status": ("active", "expired", "filled"),
    "vote_type": ("up", "down"),
    "comment_vote_type": ("helpful", "not_helpful"),
    "sentiment": ("positive", "neutral", "negative"),
}


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        server_default=sa.text("NOW()"),
        nullable=False,
    )


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id", sa.UUID(), server_default=sa.text("gen_random_uuid()"), nullable=False
    )


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    for name, values in ENUM_TYPES.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # JOB POSTINGS table
    # ========================================================================
    op.create_table(
        "job_postings",
        _uuid_pk(),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("company", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=50), nullable=True),
        sa.Column("location", sa.String(length=100), nullable=True),
        sa.Column(
            "job_type",
            postgresql.ENUM(*ENUM_TYPES["job_type"], name="job_type", create_type=False),
            server_default="onsite",
            nullable=False,
        ),
        sa.Column(
            "status",
            postgresql.ENUM(
                *ENUM_TYPES["job_status"], name="job_status", create_type=False
            ),
            server_default="active",
            nullable=False,
        ),
        sa.Column("trust_score", sa.Integer(), server_default="0", nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("char_length(title) >= 5", name="title_min_length"),
        sa.CheckConstraint("char_length(company) >= 2", name="company_min_length"),
        sa.CheckConstraint(
            "description IS NULL OR char_length(description) <= 500",
            name="description_max_length",
        ),
    )
    op.create_index(
        "idx_job_postings_status_created_at",
        "job_postings",
        ["status", sa.text("created_at DESC")],
    )
    op.create_index("idx_job_postings_owner_id", "job_postings", ["owner_id"])
    op.create_index("idx_job_postings_trust_score", "job_postings", ["trust_score"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        _uuid_pk(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("job_posting_id", sa.UUID(), nullable=False),
        sa.Column(
            "vote_type",
            postgresql.ENUM(*ENUM_TYPES["vote_type"], name="vote_type", create_type=False),
            nullable=False,
        ),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(
            ["job_posting_id"], ["job_postings.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "job_posting_id", name="uq_votes_user_job"),
    )
    op.create_index("idx_votes_job_posting_id", "votes", ["job_posting_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _uuid_pk(),
        sa.Column("job_posting_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "sentiment",
            postgresql.ENUM(
                *ENUM_TYPES["sentiment"], name="sentiment", create_type=False
            ),
            server_default="neutral",
            nullable=False,
        ),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(
            ["job_posting_id"], ["job_postings.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("char_length(content) >= 1", name="content_not_empty"),
    )
    op.create_index("idx_comments_job_posting_id", "comments", ["job_posting_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])

    # ========================================================================
    # COMMENT VOTES table
    # ========================================================================
    op.create_table(
        "comment_votes",
        _uuid_pk(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column(
            "vote_type",
            postgresql.ENUM(
                *ENUM_TYPES["comment_vote_type"],
                name="comment_vote_type",
                create_type=False,
            ),
            nullable=False,
        ),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "comment_id", name="uq_comment_votes_user_comment"
        ),
    )
    op.create_index("idx_comment_votes_comment_id", "comment_votes", ["comment_id"])

    # ========================================================================
    # BOOKMARKS table
    # ========================================================================
    op.create_table(
        "bookmarks",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("job_posting_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(
            ["job_posting_id"], ["job_postings.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("user_id", "job_posting_id", name="pk_bookmarks"),
    )
    op.create_index("idx_bookmarks_user_id", "bookmarks", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("bookmarks")
    op.drop_table("comment_votes")
    op.drop_table("comments")
    op.drop_table("votes")
    op.drop_table("job_postings")

    for name in reversed(list(ENUM_TYPES)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
