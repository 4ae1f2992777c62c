"""Reaction ledger."""

from paws.domain.model import Comment
from paws.domain.value import ReactionKind, UserId

from .base import Service


class ReactionLedger(Service):
    """Tracks at most one reaction per user per comment.

    All methods are pure: they return a new Comment and never touch storage.
    """

    def toggle(self, comment: Comment, user_id: UserId, kind: ReactionKind) -> Comment:
        """Toggle a user's reaction.

        - Already reacted with ``kind``: the reaction is removed
        - Reacted with another kind: the reaction switches to ``kind``
        - Not reacted yet: ``kind`` is added

        Args:
            comment: Comment to react to
            user_id: Reacting user
            kind: Reaction kind

        Returns:
            Comment with updated reactions
        """
        current = self.reaction_of(comment, user_id)
        reactions = dict(comment.reactions)

        if current is not None:
            remaining = reactions[current] - {user_id}
            if remaining:
                reactions[current] = remaining
            else:
                del reactions[current]

        if current != kind:
            reactions[kind] = reactions.get(kind, frozenset()) | {user_id}

        return comment.model_copy(update={"reactions": reactions})

    def reaction_of(self, comment: Comment, user_id: UserId | None) -> ReactionKind | None:
        """Return the kind the user reacted with, if any."""
        if user_id is None:
            return None
        for kind, user_ids in comment.reactions.items():
            if user_id in user_ids:
                return kind
        return None

    def counts(self, comment: Comment) -> dict[ReactionKind, int]:
        """Per-kind reaction counts, omitting kinds nobody used."""
        return {
            kind: len(user_ids)
            for kind, user_ids in comment.reactions.items()
            if user_ids
        }
