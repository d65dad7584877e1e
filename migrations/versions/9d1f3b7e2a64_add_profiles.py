"""add_profiles

Public user profiles: username, avatar, bio and karma, keyed by the auth
provider's user ID.

Revision ID: 9d1f3b7e2a64
Revises: 4c2e7d1a9b30
Create Date: 2025-06-08 12:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9d1f3b7e2a64"
down_revision: Union[str, Sequence[str], None] = "4c2e7d1a9b30"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(length=30), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column(
            "karma_points", sa.Integer(), server_default=sa.text("0"), nullable=False
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_profiles_username"),
        sa.CheckConstraint(
            "bio IS NULL OR char_length(bio) <= 500", name="bio_max_length"
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("profiles")
