"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, Sequence

from paws.domain.model.comment import Comment
from paws.domain.value import CommentId, ContextRef


class CommentRepository(ABC):
    """Repository for Comment entity (the Store Adapter).

    The engine treats the repository as the sole source of truth and keeps
    no cache of its own. Implementations live in the persistence layer.
    """

    @abstractmethod
    def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    def list_by_context(self, context: ContextRef) -> List[Comment]:
        """List every comment of a discussion context, whatever its status.

        Args:
            context: The discussion context

        Returns:
            Flat list of comments, in no guaranteed order
        """
        pass

    @abstractmethod
    def create(self, comment: Comment) -> None:
        """Store a new comment.

        Args:
            comment: The comment to store
        """
        pass

    @abstractmethod
    def update(
        self, comment_id: CommentId, patch: Mapping[str, Any]
    ) -> Optional[Comment]:
        """Apply a partial update to a comment.

        Args:
            comment_id: The comment to update
            patch: Field name to new value

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete several comment records in one write.

        Used for cascading deletes of a whole reply subtree.

        Args:
            comment_ids: The comment IDs to delete

        Returns:
            Number of records removed
        """
        pass
