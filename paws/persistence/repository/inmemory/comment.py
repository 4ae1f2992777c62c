"""In-memory comment repository for testing."""

from typing import Any, Mapping, Optional, Sequence

from paws.domain.model.comment import Comment
from paws.domain.repository.comment import CommentRepository
from paws.domain.value import CommentId, ContextRef
from paws.persistence.mappers import apply_comment_patch


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    def list_by_context(self, context: ContextRef) -> list[Comment]:
        """List all comments of a context in insertion order."""
        return [c for c in self._comments.values() if c.context == context]

    def create(self, comment: Comment) -> None:
        """Store a new comment."""
        self._comments[comment.id] = comment

    def update(
        self, comment_id: CommentId, patch: Mapping[str, Any]
    ) -> Optional[Comment]:
        """Apply a partial update."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = apply_comment_patch(comment, patch)
        self._comments[comment_id] = updated
        return updated

    def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete several comments."""
        removed = 0
        for comment_id in set(comment_ids):
            if self._comments.pop(comment_id, None) is not None:
                removed += 1
        return removed
