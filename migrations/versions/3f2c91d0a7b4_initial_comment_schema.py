"""initial_comment_schema

Create the schema for the comment engine:
- Discussion contexts (owner and pinned / best-answer highlights)
- Comments (threaded via parent_id, reactions/flags/moderation as JSON)
- User blocks and per-owner restricted lists

Revision ID: 3f2c91d0a7b4
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2c91d0a7b4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # DISCUSSION CONTEXTS table
    # ========================================================================
    op.create_table(
        "discussion_contexts",
        sa.Column("context_type", sa.String(16), nullable=False),
        sa.Column("context_id", sa.String(255), nullable=False),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("pinned_comment_id", sa.String(64), nullable=True),
        sa.Column("best_answer_comment_id", sa.String(64), nullable=True),
        sa.PrimaryKeyConstraint(
            "context_type", "context_id", name="pk_discussion_contexts"
        ),
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("context_type", sa.String(16), nullable=False),
        sa.Column("context_id", sa.String(255), nullable=False),
        sa.Column("parent_id", sa.String(64), nullable=True),
        sa.Column("author_id", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "status", sa.String(16), nullable=False, server_default="published"
        ),
        sa.Column("reactions", sa.JSON(), nullable=False),
        sa.Column("flags", sa.JSON(), nullable=False),
        sa.Column("moderation", sa.JSON(), nullable=True),
        sa.Column("attachment_image_url", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('published', 'pending', 'hidden')",
            name="comment_status_valid",
        ),
    )

    op.create_index("idx_comments_context", "comments", ["context_type", "context_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])

    # ========================================================================
    # USER RELATIONSHIP tables
    # ========================================================================
    op.create_table(
        "user_blocks",
        sa.Column("blocker_id", sa.String(255), nullable=False),
        sa.Column("blocked_id", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("blocker_id", "blocked_id", name="pk_user_blocks"),
    )
    op.create_index("idx_user_blocks_blocked_id", "user_blocks", ["blocked_id"])

    op.create_table(
        "user_restrictions",
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("owner_id", "user_id", name="pk_user_restrictions"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("user_restrictions")
    op.drop_index("idx_user_blocks_blocked_id", table_name="user_blocks")
    op.drop_table("user_blocks")
    op.drop_index("idx_comments_parent_id", table_name="comments")
    op.drop_index("idx_comments_context", table_name="comments")
    op.drop_table("comments")
    op.drop_table("discussion_contexts")
