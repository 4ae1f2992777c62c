"""SQL implementation of Comment repository."""

from typing import Any, List, Mapping, Optional, Sequence

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.orm import Session

from paws.domain.model import Comment
from paws.domain.repository import CommentRepository
from paws.domain.value import CommentId, ContextRef
from paws.persistence.mappers import (
    apply_comment_patch,
    comment_to_dict,
    row_to_comment,
)
from paws.persistence.tables import comments_table


class SqlCommentRepository(CommentRepository):
    """SQLAlchemy Core implementation of CommentRepository."""

    def __init__(self, session: Session) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy session
        """
        self.session = session

    def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        row = self.session.execute(stmt).fetchone()
        return row_to_comment(row._asdict()) if row else None

    def list_by_context(self, context: ContextRef) -> List[Comment]:
        """List every comment of a context, oldest first."""
        stmt = (
            select(comments_table)
            .where(
                and_(
                    comments_table.c.context_type == context.context_type.value,
                    comments_table.c.context_id == context.context_id,
                )
            )
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    def create(self, comment: Comment) -> None:
        """Insert a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        self.session.execute(stmt)
        self.session.flush()

    def update(
        self, comment_id: CommentId, patch: Mapping[str, Any]
    ) -> Optional[Comment]:
        """Apply a partial update.

        The patch is validated against the domain model before anything is
        written, so a bad patch leaves the row untouched.
        """
        current = self.find_by_id(comment_id)
        if current is None:
            return None

        updated = apply_comment_patch(current, patch)
        values = comment_to_dict(updated)
        values.pop("id")
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(**values)
        )
        self.session.execute(stmt)
        self.session.flush()
        return updated

    def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete several comments in one statement."""
        if not comment_ids:
            return 0
        stmt = delete(comments_table).where(
            comments_table.c.id.in_(set(comment_ids))
        )
        result = self.session.execute(stmt)
        self.session.flush()
        return result.rowcount or 0
