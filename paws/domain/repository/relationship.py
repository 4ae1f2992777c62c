"""User relationship repository interface."""

from abc import ABC, abstractmethod

from paws.domain.value import UserId


class RelationshipRepository(ABC):
    """Social relationships between users that the engine consults.

    Covers two host-owned relationships:
    - Blocking: bidirectional opacity between two users
    - Restriction: a soft block by a content owner; comments by restricted
      users on the owner's content start out pending review
    """

    @abstractmethod
    def are_blocked(self, user_a: UserId, user_b: UserId) -> bool:
        """Whether either user has blocked the other.

        Args:
            user_a: First user
            user_b: Second user

        Returns:
            True if a block exists in either direction
        """
        pass

    @abstractmethod
    def block(self, blocker_id: UserId, blocked_id: UserId) -> None:
        """Record that blocker_id blocked blocked_id."""
        pass

    @abstractmethod
    def unblock(self, blocker_id: UserId, blocked_id: UserId) -> None:
        """Remove a block recorded by blocker_id."""
        pass

    @abstractmethod
    def is_restricted(self, owner_id: UserId, user_id: UserId) -> bool:
        """Whether owner_id has restricted user_id.

        Args:
            owner_id: Content owner
            user_id: User who may be on the owner's restricted list

        Returns:
            True if user_id is restricted by owner_id
        """
        pass

    @abstractmethod
    def restrict(self, owner_id: UserId, user_id: UserId) -> None:
        """Add user_id to owner_id's restricted list."""
        pass

    @abstractmethod
    def unrestrict(self, owner_id: UserId, user_id: UserId) -> None:
        """Remove user_id from owner_id's restricted list."""
        pass
