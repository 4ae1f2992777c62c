"""Highlight selector: pinned and best-answer comments."""

from dataclasses import dataclass

from paws.domain.error import NotAuthorizedError, NotFoundError
from paws.domain.model import Actor, Comment, DiscussionContext
from paws.domain.value import CommentId, HighlightKind

from .base import Service
from .permission_evaluator import PermissionEvaluator
from .tree_builder import CommentNode, find


@dataclass
class Highlights:
    """Nodes promoted to the fixed slots above a thread.

    The nodes are the same objects that appear in the thread itself, so a
    highlighted comment renders twice.
    """

    pinned: CommentNode | None = None
    best_answer: CommentNode | None = None


class HighlightSelector(Service):
    """Designates at most one pinned and one best-answer comment per context."""

    def __init__(self, permissions: PermissionEvaluator) -> None:
        """Initialize highlight selector.

        Args:
            permissions: Permission predicates
        """
        self.permissions = permissions

    def toggle(
        self,
        context: DiscussionContext,
        actor: Actor | None,
        kind: HighlightKind,
        comment_id: CommentId,
        comments: list[Comment],
    ) -> DiscussionContext:
        """Set a highlight slot, or clear it if it already holds comment_id.

        Args:
            context: Discussion context
            actor: Acting user (must own the context)
            kind: Slot to change
            comment_id: Comment to promote
            comments: All comments of the context

        Returns:
            Context with the slot updated

        Raises:
            NotAuthorizedError: If the actor does not own the context
            NotFoundError: If comment_id is not a comment of this context
        """
        if not self.permissions.can_highlight(actor, context.owner_id):
            raise NotAuthorizedError(
                f"set {kind.value} on", str(context.ref), actor.id if actor else None
            )
        if not any(c.id == comment_id for c in comments):
            raise NotFoundError("Comment", comment_id)

        if context.highlight(kind) == comment_id:
            return context.with_highlight(kind, None)
        return context.with_highlight(kind, comment_id)

    def resolve(
        self, context: DiscussionContext, nodes: list[CommentNode]
    ) -> Highlights:
        """Look up highlighted nodes in a built thread.

        References to comments that no longer exist, or that the viewer cannot
        see, resolve to None.
        """

        def lookup(comment_id: CommentId | None) -> CommentNode | None:
            return find(nodes, comment_id) if comment_id else None

        return Highlights(
            pinned=lookup(context.pinned_comment_id),
            best_answer=lookup(context.best_answer_comment_id),
        )
