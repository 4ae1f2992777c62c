"""In-memory relationship repository for testing."""

from paws.domain.repository.relationship import RelationshipRepository
from paws.domain.value import UserId


class InMemoryRelationshipRepository(RelationshipRepository):
    """In-memory implementation of RelationshipRepository for testing."""

    def __init__(self) -> None:
        self._blocks: set[tuple[UserId, UserId]] = set()
        self._restrictions: set[tuple[UserId, UserId]] = set()

    def are_blocked(self, user_a: UserId, user_b: UserId) -> bool:
        """Check for a block in either direction."""
        return (user_a, user_b) in self._blocks or (user_b, user_a) in self._blocks

    def block(self, blocker_id: UserId, blocked_id: UserId) -> None:
        """Record a block."""
        self._blocks.add((blocker_id, blocked_id))

    def unblock(self, blocker_id: UserId, blocked_id: UserId) -> None:
        """Remove a block."""
        self._blocks.discard((blocker_id, blocked_id))

    def is_restricted(self, owner_id: UserId, user_id: UserId) -> bool:
        """Check the owner's restricted list."""
        return (owner_id, user_id) in self._restrictions

    def restrict(self, owner_id: UserId, user_id: UserId) -> None:
        """Add to the owner's restricted list."""
        self._restrictions.add((owner_id, user_id))

    def unrestrict(self, owner_id: UserId, user_id: UserId) -> None:
        """Remove from the owner's restricted list."""
        self._restrictions.discard((owner_id, user_id))
