"""Permission predicates for comment actions."""

from paws.domain.model import Actor, Comment
from paws.domain.value import UserId

from .base import Service


class PermissionEvaluator(Service):
    """Pure, stateless authorization predicates.

    Every predicate refuses an anonymous actor (None). Context ownership is
    passed in explicitly because the owner lives on the discussion context,
    not on the comment.
    """

    def can_edit(self, comment: Comment, actor: Actor | None) -> bool:
        """Only the author may edit, with no time window."""
        return actor is not None and actor.id == comment.author_id

    def can_delete(
        self, comment: Comment, actor: Actor | None, context_owner_id: UserId
    ) -> bool:
        """The author, a moderator or the context owner may delete."""
        if actor is None:
            return False
        return (
            actor.id == comment.author_id
            or actor.is_moderator
            or actor.id == context_owner_id
        )

    def can_moderate(self, actor: Actor | None, context_owner_id: UserId) -> bool:
        """Moderators, admins and the context owner may moderate."""
        if actor is None:
            return False
        return actor.is_moderator or actor.id == context_owner_id

    def can_highlight(self, actor: Actor | None, context_owner_id: UserId) -> bool:
        """Only the context owner may pin or mark a best answer."""
        return actor is not None and actor.id == context_owner_id
