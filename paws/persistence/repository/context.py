"""SQL implementation of DiscussionContext repository."""

from typing import Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.orm import Session

from paws.domain.model import DiscussionContext
from paws.domain.repository import DiscussionContextRepository
from paws.domain.value import ContextRef
from paws.persistence.mappers import context_to_dict, row_to_context
from paws.persistence.tables import discussion_contexts_table


class SqlDiscussionContextRepository(DiscussionContextRepository):
    """SQLAlchemy Core implementation of DiscussionContextRepository."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def _where_ref(self, ref: ContextRef):
        return and_(
            discussion_contexts_table.c.context_type == ref.context_type.value,
            discussion_contexts_table.c.context_id == ref.context_id,
        )

    def find_by_ref(self, ref: ContextRef) -> Optional[DiscussionContext]:
        """Find a context by reference."""
        stmt = select(discussion_contexts_table).where(self._where_ref(ref))
        row = self.session.execute(stmt).fetchone()
        return row_to_context(row._asdict()) if row else None

    def save(self, context: DiscussionContext) -> DiscussionContext:
        """Save a context (create or update)."""
        values = context_to_dict(context)
        if self.find_by_ref(context.ref) is None:
            stmt = insert(discussion_contexts_table).values(**values)
        else:
            stmt = (
                update(discussion_contexts_table)
                .where(self._where_ref(context.ref))
                .values(
                    owner_id=values["owner_id"],
                    pinned_comment_id=values["pinned_comment_id"],
                    best_answer_comment_id=values["best_answer_comment_id"],
                )
            )
        self.session.execute(stmt)
        self.session.flush()
        return context
