"""Moderation state machine."""

from datetime import datetime

import logfire

from paws.domain.error import InvalidTransitionError, NotAuthorizedError
from paws.domain.model import Actor, Comment, ModerationRecord
from paws.domain.repository import RelationshipRepository
from paws.domain.value import CommentStatus, UserId

from .base import Service
from .flag_ledger import FlagLedger
from .permission_evaluator import PermissionEvaluator

PUBLISHED = CommentStatus.PUBLISHED
PENDING = CommentStatus.PENDING
HIDDEN = CommentStatus.HIDDEN

# Status changes a moderation action may make. Re-applying the current
# status is also allowed: it refreshes the audit record and can clear flags.
MODERATION_TRANSITIONS: frozenset[tuple[CommentStatus, CommentStatus]] = frozenset(
    {
        (PENDING, PUBLISHED),
        (PENDING, HIDDEN),
        (PUBLISHED, HIDDEN),
        (HIDDEN, PUBLISHED),
    }
)


class ModerationStateMachine(Service):
    """Governs the published / pending / hidden lifecycle of a comment.

    | From      | To        | Who                                   |
    |-----------|-----------|---------------------------------------|
    | (new)     | published | author not restricted by the owner    |
    | (new)     | pending   | author restricted by the owner        |
    | pending   | published | owner/moderator (quick approve)       |
    | pending   | hidden    | owner/moderator (moderation action)   |
    | published | hidden    | owner/moderator (moderation action)   |
    | hidden    | published | owner/moderator (moderation action)   |
    | published | pending   | system, when the flag threshold hits  |
    """

    def __init__(
        self,
        relationship_repository: RelationshipRepository,
        permissions: PermissionEvaluator,
        flag_ledger: FlagLedger,
    ) -> None:
        """Initialize moderation state machine.

        Args:
            relationship_repository: Restricted-user lookup
            permissions: Permission predicates
            flag_ledger: Flag ledger, used to clear flags on request
        """
        self.relationship_repository = relationship_repository
        self.permissions = permissions
        self.flag_ledger = flag_ledger

    def initial_status(self, author_id: UserId, context_owner_id: UserId) -> CommentStatus:
        """Status of a new comment by author_id on context_owner_id's content."""
        if author_id != context_owner_id and self.relationship_repository.is_restricted(
            context_owner_id, author_id
        ):
            return PENDING
        return PUBLISHED

    def can_transition(self, from_status: CommentStatus, to_status: CommentStatus) -> bool:
        """Whether a moderation action may move a comment between two statuses."""
        return from_status == to_status or (from_status, to_status) in MODERATION_TRANSITIONS

    def moderate(
        self,
        comment: Comment,
        actor: Actor | None,
        context_owner_id: UserId,
        status: CommentStatus,
        note: str | None = None,
        clear_flags: bool = False,
        now: datetime | None = None,
    ) -> Comment:
        """Apply a moderation action.

        Always overwrites the audit record with this action; earlier actions
        are not retained.

        Args:
            comment: Comment being moderated
            actor: Moderating actor
            context_owner_id: Owner of the comment's context
            status: Target status
            note: Optional moderator note
            clear_flags: Whether to drop all flags as part of the action
            now: Action time (defaults to the current time)

        Returns:
            Comment with new status and audit record

        Raises:
            NotAuthorizedError: If the actor cannot moderate this context
            InvalidTransitionError: If the status change is not allowed
        """
        if not self.permissions.can_moderate(actor, context_owner_id):
            raise NotAuthorizedError(
                "moderate comment", comment.id, actor.id if actor else None
            )
        if not self.can_transition(comment.status, status):
            raise InvalidTransitionError(comment.id, comment.status.value, status.value)

        moderated = comment.model_copy(
            update={
                "status": status,
                "moderation": ModerationRecord(
                    moderator_id=actor.id,
                    status=status,
                    note=note,
                    updated_at=now or datetime.now(),
                ),
            }
        )
        if clear_flags:
            moderated = self.flag_ledger.clear(moderated)

        logfire.info(
            "Moderation transition applied",
            comment_id=comment.id,
            from_status=comment.status.value,
            to_status=status.value,
            moderator_id=actor.id,
            cleared_flags=clear_flags,
        )
        return moderated

    def approve(
        self, comment: Comment, actor: Actor | None, context_owner_id: UserId
    ) -> Comment:
        """Quick approve: pending -> published without an audit record.

        Raises:
            NotAuthorizedError: If the actor cannot moderate this context
            InvalidTransitionError: If the comment is not pending
        """
        if not self.permissions.can_moderate(actor, context_owner_id):
            raise NotAuthorizedError(
                "approve comment", comment.id, actor.id if actor else None
            )
        if comment.status != PENDING:
            raise InvalidTransitionError(comment.id, comment.status.value, PUBLISHED.value)
        return comment.model_copy(update={"status": PUBLISHED})

    def hold(self, comment: Comment, flag_threshold: int | None) -> Comment:
        """Hold a published comment for review once it collects enough flags.

        Returns the comment unchanged when no threshold is configured, the
        threshold is not reached, or the comment is not published.
        """
        if (
            flag_threshold is None
            or comment.status != PUBLISHED
            or comment.flag_count < flag_threshold
        ):
            return comment

        logfire.info(
            "Comment held for review",
            comment_id=comment.id,
            flag_count=comment.flag_count,
            threshold=flag_threshold,
        )
        return comment.model_copy(update={"status": PENDING})
