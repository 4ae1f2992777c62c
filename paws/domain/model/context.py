"""Discussion context entity.

A discussion context is the post, wiki article or pet photo that comments
hang off. The engine only needs to know who owns it and which comments the
owner promoted to the pinned and best-answer slots.
"""

from typing import Optional

from paws.domain.model.common import DomainModel
from paws.domain.value import CommentId, ContextRef, HighlightKind, UserId


class DiscussionContext(DomainModel):
    """Discussion context entity.

    Highlight references are not foreign keys: a reference to a comment that
    no longer exists is treated as "not set" when the thread is read.
    """

    ref: ContextRef
    owner_id: UserId
    pinned_comment_id: Optional[CommentId] = None
    best_answer_comment_id: Optional[CommentId] = None

    def highlight(self, kind: HighlightKind) -> Optional[CommentId]:
        """Return the comment id currently in the given slot."""
        if kind == HighlightKind.PINNED:
            return self.pinned_comment_id
        return self.best_answer_comment_id

    def with_highlight(
        self, kind: HighlightKind, comment_id: Optional[CommentId]
    ) -> "DiscussionContext":
        """Return a copy with the given slot set (or cleared with None)."""
        field = (
            "pinned_comment_id"
            if kind == HighlightKind.PINNED
            else "best_answer_comment_id"
        )
        return self.model_copy(update={field: comment_id})
