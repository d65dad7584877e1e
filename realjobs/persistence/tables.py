"""SQLAlchemy table definitions for Real Job Postings.

They match the schema defined in Alembic migrations. Accounts live with
the external auth provider, so user IDs are plain UUID columns; public
profiles are stored here keyed by that ID.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ENUM, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# JOB POSTINGS TABLE
# ============================================================================
job_postings_table = Table(
    "job_postings",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("owner_id", UUID, nullable=False),
    Column("url", Text, nullable=False),
    Column("title", String(200), nullable=False),
    Column("company", String(100), nullable=False),
    Column("description", Text, nullable=True),
    Column("category", String(50), nullable=True),
    Column("location", String(100), nullable=True),
    Column(
        "job_type",
        ENUM("remote", "hybrid", "onsite", name="job_type", create_type=False),
        nullable=False,
        server_default="onsite",
    ),
    Column(
        "status",
        ENUM("active", "expired", "filled", name="job_status", create_type=False),
        nullable=False,
        server_default="active",
    ),
    # Cached net vote count, recomputed from votes after every vote write
    Column("trust_score", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("char_length(title) >= 5", name="title_min_length"),
    CheckConstraint("char_length(company) >= 2", name="company_min_length"),
    CheckConstraint(
        "description IS NULL OR char_length(description) <= 500",
        name="description_max_length",
    ),
)

Index(
    "idx_job_postings_status_created_at",
    job_postings_table.c.status,
    job_postings_table.c.created_at.desc(),
)
Index("idx_job_postings_owner_id", job_postings_table.c.owner_id)
Index("idx_job_postings_trust_score", job_postings_table.c.trust_score)

# ============================================================================
# VOTES TABLE (legitimacy votes on jobs)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, nullable=False),
    Column(
        "job_posting_id",
        UUID,
        ForeignKey("job_postings.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "vote_type",
        ENUM("up", "down", name="vote_type", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "job_posting_id", name="uq_votes_user_job"),
)

Index("idx_votes_job_posting_id", votes_table.c.job_posting_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "job_posting_id",
        UUID,
        ForeignKey("job_postings.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("author_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "sentiment",
        ENUM("positive", "neutral", "negative", name="sentiment", create_type=False),
        nullable=False,
        server_default="neutral",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("char_length(content) >= 1", name="content_not_empty"),
)

Index("idx_comments_job_posting_id", comments_table.c.job_posting_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# COMMENT VOTES TABLE (helpful / not helpful)
# ============================================================================
comment_votes_table = Table(
    "comment_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, nullable=False),
    Column(
        "comment_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "vote_type",
        ENUM("helpful", "not_helpful", name="comment_vote_type", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "comment_id", name="uq_comment_votes_user_comment"),
)

Index("idx_comment_votes_comment_id", comment_votes_table.c.comment_id)

# ============================================================================
# BOOKMARKS TABLE
# ============================================================================
bookmarks_table = Table(
    "bookmarks",
    metadata,
    Column("user_id", UUID, nullable=False),
    Column(
        "job_posting_id",
        UUID,
        ForeignKey("job_postings.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("user_id", "job_posting_id", name="pk_bookmarks"),
)

Index("idx_bookmarks_user_id", bookmarks_table.c.user_id)

# ============================================================================
# PROFILES TABLE (keyed by the auth provider's user ID)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(30), nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column("karma_points", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("username", name="uq_profiles_username"),
    CheckConstraint("bio IS NULL OR char_length(bio) <= 500", name="bio_max_length"),
)
