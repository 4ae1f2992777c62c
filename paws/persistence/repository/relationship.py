"""SQL implementation of Relationship repository."""

from sqlalchemy import and_, delete, insert, or_, select
from sqlalchemy.orm import Session

from paws.domain.repository import RelationshipRepository
from paws.domain.value import UserId
from paws.persistence.tables import user_blocks_table, user_restrictions_table


class SqlRelationshipRepository(RelationshipRepository):
    """SQLAlchemy Core implementation of RelationshipRepository."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def are_blocked(self, user_a: UserId, user_b: UserId) -> bool:
        """Check for a block in either direction."""
        blocks = user_blocks_table.c
        stmt = (
            select(blocks.blocker_id)
            .where(
                or_(
                    and_(blocks.blocker_id == user_a, blocks.blocked_id == user_b),
                    and_(blocks.blocker_id == user_b, blocks.blocked_id == user_a),
                )
            )
            .limit(1)
        )
        return self.session.execute(stmt).first() is not None

    def block(self, blocker_id: UserId, blocked_id: UserId) -> None:
        """Record a block (idempotent)."""
        blocks = user_blocks_table.c
        exists = self.session.execute(
            select(blocks.blocker_id).where(
                and_(blocks.blocker_id == blocker_id, blocks.blocked_id == blocked_id)
            )
        ).first()
        if exists is None:
            self.session.execute(
                insert(user_blocks_table).values(
                    blocker_id=blocker_id, blocked_id=blocked_id
                )
            )
            self.session.flush()

    def unblock(self, blocker_id: UserId, blocked_id: UserId) -> None:
        """Remove a block."""
        blocks = user_blocks_table.c
        self.session.execute(
            delete(user_blocks_table).where(
                and_(blocks.blocker_id == blocker_id, blocks.blocked_id == blocked_id)
            )
        )
        self.session.flush()

    def is_restricted(self, owner_id: UserId, user_id: UserId) -> bool:
        """Check the owner's restricted list."""
        restrictions = user_restrictions_table.c
        stmt = select(restrictions.user_id).where(
            and_(restrictions.owner_id == owner_id, restrictions.user_id == user_id)
        )
        return self.session.execute(stmt).first() is not None

    def restrict(self, owner_id: UserId, user_id: UserId) -> None:
        """Add to the owner's restricted list (idempotent)."""
        if not self.is_restricted(owner_id, user_id):
            self.session.execute(
                insert(user_restrictions_table).values(
                    owner_id=owner_id, user_id=user_id
                )
            )
            self.session.flush()

    def unrestrict(self, owner_id: UserId, user_id: UserId) -> None:
        """Remove from the owner's restricted list."""
        restrictions = user_restrictions_table.c
        self.session.execute(
            delete(user_restrictions_table).where(
                and_(restrictions.owner_id == owner_id, restrictions.user_id == user_id)
            )
        )
        self.session.flush()
