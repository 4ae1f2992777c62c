"""SQLAlchemy table definitions for the comment engine.

These table definitions are used with SQLAlchemy Core; domain models are
mapped by hand in ``paws.persistence.mappers``. They match the schema
defined in the Alembic migrations.
"""

from sqlalchemy import (
    JSON,
    CheckConstraint,
    Column,
    DateTime,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# DISCUSSION CONTEXTS TABLE
# ============================================================================
discussion_contexts_table = Table(
    "discussion_contexts",
    metadata,
    Column("context_type", String(16), nullable=False),  # 'post', 'wiki', 'photo'
    Column("context_id", String(255), nullable=False),
    Column("owner_id", String(255), nullable=False),
    # Not foreign keys: dangling highlights are read back as "not set"
    Column("pinned_comment_id", String(64), nullable=True),
    Column("best_answer_comment_id", String(64), nullable=True),
    PrimaryKeyConstraint("context_type", "context_id", name="pk_discussion_contexts"),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("context_type", String(16), nullable=False),
    Column("context_id", String(255), nullable=False),
    # No foreign key: orphans and broken ancestry are repaired at read time
    Column("parent_id", String(64), nullable=True),
    Column("author_id", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("status", String(16), nullable=False, server_default="published"),
    Column("reactions", JSON, nullable=False),  # {kind: [user_id, ...]}
    Column("flags", JSON, nullable=False),  # [{user_id, reason, message, flagged_at}]
    Column("moderation", JSON, nullable=True),  # latest audit record only
    Column("attachment_image_url", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=True),
    CheckConstraint(
        "status IN ('published', 'pending', 'hidden')", name="comment_status_valid"
    ),
)

Index(
    "idx_comments_context",
    comments_table.c.context_type,
    comments_table.c.context_id,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# USER RELATIONSHIP TABLES
# ============================================================================
user_blocks_table = Table(
    "user_blocks",
    metadata,
    Column("blocker_id", String(255), nullable=False),
    Column("blocked_id", String(255), nullable=False),
    PrimaryKeyConstraint("blocker_id", "blocked_id", name="pk_user_blocks"),
)

Index("idx_user_blocks_blocked_id", user_blocks_table.c.blocked_id)

user_restrictions_table = Table(
    "user_restrictions",
    metadata,
    Column("owner_id", String(255), nullable=False),
    Column("user_id", String(255), nullable=False),
    PrimaryKeyConstraint("owner_id", "user_id", name="pk_user_restrictions"),
)
