"""Comment domain service."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

import logfire

from paws.config import ModerationSettings
from paws.domain.error import (
    InteractionBlockedError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from paws.domain.model import Actor, Comment, DiscussionContext
from paws.domain.repository import (
    CommentRepository,
    DiscussionContextRepository,
    RelationshipRepository,
)
from paws.domain.value import (
    CommentId,
    CommentStatus,
    ContextRef,
    FlagReason,
    HighlightKind,
    ReactionKind,
    SortMode,
    UserId,
)

from .base import Service
from .flag_ledger import FlagLedger
from .highlight_selector import Highlights, HighlightSelector
from .moderation import ModerationStateMachine
from .permission_evaluator import PermissionEvaluator
from .reaction_ledger import ReactionLedger
from .tree_builder import CommentNode, TreeBuilder, find
from .visibility_filter import VisibilityFilter

MAX_CONTENT_LENGTH = 10000


@dataclass
class Thread:
    """A discussion context as one viewer sees it."""

    context: DiscussionContext
    nodes: list[CommentNode]
    highlights: Highlights = field(default_factory=Highlights)


class CommentService(Service):
    """Domain service for comment operations.

    Every mutation is a synchronous read-modify-write against the repository:
    look the comment up, check permissions, compute the new record with the
    ledgers or the state machine, then write it back. Nothing is cached, so
    the next read re-runs the filter and tree build against fresh records.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        context_repository: DiscussionContextRepository,
        relationship_repository: RelationshipRepository,
        visibility_filter: VisibilityFilter,
        tree_builder: TreeBuilder,
        permissions: PermissionEvaluator,
        reaction_ledger: ReactionLedger,
        flag_ledger: FlagLedger,
        moderation: ModerationStateMachine,
        highlight_selector: HighlightSelector,
        moderation_settings: ModerationSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository (store adapter)
            context_repository: Discussion context repository
            relationship_repository: Blocking and restriction lookups
            visibility_filter: Viewer visibility rules
            tree_builder: Flat list to reply forest
            permissions: Permission predicates
            reaction_ledger: Reaction toggling
            flag_ledger: Flag bookkeeping
            moderation: Moderation state machine
            highlight_selector: Pinned / best-answer slots
            moderation_settings: Moderation configuration
        """
        self.comment_repository = comment_repository
        self.context_repository = context_repository
        self.relationship_repository = relationship_repository
        self.visibility_filter = visibility_filter
        self.tree_builder = tree_builder
        self.permissions = permissions
        self.reaction_ledger = reaction_ledger
        self.flag_ledger = flag_ledger
        self.moderation = moderation
        self.highlight_selector = highlight_selector
        self.moderation_settings = moderation_settings

    # Contexts

    def open_context(self, ref: ContextRef, owner_id: UserId) -> DiscussionContext:
        """Register a discussion context, or return the existing one.

        Args:
            ref: Context type and id
            owner_id: User who owns the post, article or photo

        Returns:
            The registered context
        """
        with logfire.span("comment_service.open_context", context=str(ref)):
            existing = self.context_repository.find_by_ref(ref)
            if existing:
                return existing
            context = self.context_repository.save(
                DiscussionContext(ref=ref, owner_id=owner_id)
            )
            logfire.info("Discussion context opened", context=str(ref), owner_id=owner_id)
            return context

    def get_context(self, ref: ContextRef) -> DiscussionContext:
        """Get a discussion context.

        Raises:
            NotFoundError: If the context was never opened
        """
        context = self.context_repository.find_by_ref(ref)
        if not context:
            logfire.warn("Discussion context not found", context=str(ref))
            raise NotFoundError("Discussion context", str(ref))
        return context

    # Reads

    def get_thread(
        self,
        ref: ContextRef,
        viewer: Actor | None,
        sort_mode: SortMode | None = None,
    ) -> Thread:
        """Get the reply forest of a context as the viewer may see it.

        Args:
            ref: Discussion context
            viewer: Viewing actor, None when anonymous
            sort_mode: Root ordering (defaults to the configured mode)

        Returns:
            Thread with nodes and highlight slots
        """
        sort_mode = sort_mode or self.moderation_settings.default_sort_mode
        with logfire.span(
            "comment_service.get_thread",
            context=str(ref),
            viewer_id=viewer.id if viewer else None,
            sort_mode=sort_mode.value,
        ):
            context = self.get_context(ref)
            comments = self.comment_repository.list_by_context(ref)
            visible = self.visibility_filter.filter(comments, viewer, context.owner_id)
            nodes = self.tree_builder.build(visible, sort_mode)
            highlights = self.highlight_selector.resolve(context, nodes)
            logfire.info(
                "Thread retrieved",
                context=str(ref),
                total=len(comments),
                visible=len(visible),
            )
            return Thread(context=context, nodes=nodes, highlights=highlights)

    def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = self.comment_repository.find_by_id(comment_id)
        if not comment:
            logfire.warn("Comment not found", comment_id=comment_id)
            raise NotFoundError("Comment", comment_id)
        return comment

    def moderation_queue(self, ref: ContextRef, actor: Actor | None) -> list[Comment]:
        """Comments awaiting review: pending or flagged.

        Ordered most-flagged first, then oldest first.

        Raises:
            NotAuthorizedError: If the actor cannot moderate the context
        """
        with logfire.span("comment_service.moderation_queue", context=str(ref)):
            context = self.get_context(ref)
            if not self.permissions.can_moderate(actor, context.owner_id):
                raise NotAuthorizedError(
                    "review comments of", str(ref), actor.id if actor else None
                )
            queue = [
                c
                for c in self.comment_repository.list_by_context(ref)
                if c.status == CommentStatus.PENDING or c.flags
            ]
            queue.sort(key=lambda c: (-c.flag_count, c.created_at))
            logfire.info("Moderation queue built", context=str(ref), count=len(queue))
            return queue

    # Authoring

    def create_comment(
        self,
        ref: ContextRef,
        actor: Actor | None,
        content: str,
        parent_id: CommentId | None = None,
        attachment_image_url: str | None = None,
    ) -> Comment:
        """Create a comment in a context, or a reply to another comment.

        Args:
            ref: Discussion context
            actor: Author
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)
            attachment_image_url: Optional image reference

        Returns:
            Created comment, published or pending review

        Raises:
            NotAuthorizedError: If the actor is anonymous
            InteractionBlockedError: If the author and context owner are blocked
            NotFoundError: If the context or parent comment does not exist
            ValidationError: If the content is invalid or the parent belongs
                to another context
        """
        with logfire.span(
            "comment_service.create_comment",
            context=str(ref),
            author_id=actor.id if actor else None,
            parent_id=parent_id,
        ):
            context = self.get_context(ref)
            if actor is None:
                raise NotAuthorizedError("comment on", str(ref), None)
            self._ensure_not_blocked(actor, context.owner_id)
            content = self._validate_content(content)

            if parent_id:
                parent = self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=parent_id,
                        context=str(ref),
                    )
                    raise NotFoundError("Parent comment", parent_id)
                if parent.context != ref:
                    logfire.error(
                        "Parent comment does not belong to context",
                        parent_id=parent_id,
                        parent_context=str(parent.context),
                        target_context=str(ref),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this context"
                    )

            comment = Comment(
                id=CommentId(str(uuid4())),
                author_id=actor.id,
                content=content,
                context=ref,
                parent_id=parent_id,
                created_at=datetime.now(),
                status=self.moderation.initial_status(actor.id, context.owner_id),
                attachment_image_url=attachment_image_url,
            )
            self.comment_repository.create(comment)
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                context=str(ref),
                status=comment.status.value,
            )
            return comment

    def edit_comment(
        self, comment_id: CommentId, actor: Actor | None, content: str
    ) -> Comment:
        """Replace the content of a comment.

        Moderation status is left untouched: editing is orthogonal to review.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the author
            ValidationError: If the content is invalid
        """
        with logfire.span("comment_service.edit_comment", comment_id=comment_id):
            comment = self.get_comment(comment_id)
            if not self.permissions.can_edit(comment, actor):
                raise NotAuthorizedError(
                    "edit comment", comment_id, actor.id if actor else None
                )
            content = self._validate_content(content)
            updated = self._write(
                comment_id, {"content": content, "updated_at": datetime.now()}
            )
            logfire.info(
                "Comment edited", comment_id=comment_id, content_length=len(content)
            )
            return updated

    def delete_comment(
        self, comment_id: CommentId, actor: Actor | None
    ) -> list[CommentId]:
        """Delete a comment together with its entire reply subtree.

        Returns:
            Ids of every deleted comment, the target first

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor may not delete the comment
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            comment = self.get_comment(comment_id)
            context = self.get_context(comment.context)
            if not self.permissions.can_delete(comment, actor, context.owner_id):
                raise NotAuthorizedError(
                    "delete comment", comment_id, actor.id if actor else None
                )

            # Cascade over every status, not just what the actor can see
            nodes = self.tree_builder.build(
                self.comment_repository.list_by_context(comment.context)
            )
            node = find(nodes, comment_id)
            doomed = node.subtree_ids() if node else [comment_id]

            removed = self.comment_repository.delete_many(doomed)
            self._drop_highlights(context, set(doomed))
            logfire.info(
                "Comment subtree deleted",
                comment_id=comment_id,
                removed=removed,
                actor_id=actor.id,
            )
            return doomed

    # Engagement

    def toggle_reaction(
        self, comment_id: CommentId, actor: Actor | None, kind: ReactionKind
    ) -> Comment:
        """Toggle the actor's reaction on a comment.

        Raises:
            NotFoundError: If the comment does not exist or is not visible
            NotAuthorizedError: If the actor is anonymous
            InteractionBlockedError: If a block separates actor and context owner
        """
        with logfire.span(
            "comment_service.toggle_reaction",
            comment_id=comment_id,
            kind=kind.value,
        ):
            comment = self._get_visible(comment_id, actor, "react to", check_blocks=True)
            updated = self.reaction_ledger.toggle(comment, actor.id, kind)
            saved = self._write(comment_id, {"reactions": updated.reactions})
            current = self.reaction_ledger.reaction_of(saved, actor.id)
            logfire.info(
                "Reaction toggled",
                comment_id=comment_id,
                user_id=actor.id,
                reaction=current.value if current else None,
            )
            return saved

    def flag_comment(
        self,
        comment_id: CommentId,
        actor: Actor | None,
        reason: FlagReason,
        message: str | None = None,
    ) -> Comment:
        """Flag a comment, replacing the actor's earlier flag if any.

        When an automatic hold threshold is configured, a published comment
        that reaches it moves to pending review.

        Raises:
            NotFoundError: If the comment does not exist or is not visible
            NotAuthorizedError: If the actor is anonymous
        """
        with logfire.span(
            "comment_service.flag_comment",
            comment_id=comment_id,
            reason=reason.value,
        ):
            comment = self._get_visible(comment_id, actor, "flag")
            flagged = self.flag_ledger.flag(comment, actor.id, reason, message or None)
            flagged = self.moderation.hold(
                flagged, self.moderation_settings.auto_hold_flag_threshold
            )
            saved = self._write(
                comment_id, {"flags": flagged.flags, "status": flagged.status}
            )
            logfire.info(
                "Comment flagged",
                comment_id=comment_id,
                user_id=actor.id,
                flag_count=saved.flag_count,
            )
            return saved

    def withdraw_flag(self, comment_id: CommentId, actor: Actor | None) -> Comment:
        """Withdraw the actor's own flag from a comment.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is anonymous
        """
        with logfire.span("comment_service.withdraw_flag", comment_id=comment_id):
            comment = self.get_comment(comment_id)
            if actor is None:
                raise NotAuthorizedError("withdraw flag on", comment_id, None)
            updated = self.flag_ledger.withdraw(comment, actor.id)
            saved = self._write(comment_id, {"flags": updated.flags})
            logfire.info("Flag withdrawn", comment_id=comment_id, user_id=actor.id)
            return saved

    # Moderation

    def moderate_comment(
        self,
        comment_id: CommentId,
        actor: Actor | None,
        status: CommentStatus,
        note: str | None = None,
        clear_flags: bool = False,
    ) -> Comment:
        """Apply a moderation action and record it in the audit record.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor cannot moderate the context
            InvalidTransitionError: If the status change is not allowed
        """
        with logfire.span(
            "comment_service.moderate_comment",
            comment_id=comment_id,
            status=status.value,
        ):
            comment = self.get_comment(comment_id)
            context = self.get_context(comment.context)
            moderated = self.moderation.moderate(
                comment,
                actor,
                context.owner_id,
                status,
                note=note or None,
                clear_flags=clear_flags,
            )
            return self._write(
                comment_id,
                {
                    "status": moderated.status,
                    "moderation": moderated.moderation,
                    "flags": moderated.flags,
                },
            )

    def approve_comment(self, comment_id: CommentId, actor: Actor | None) -> Comment:
        """Quick approve a pending comment.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor cannot moderate the context
            InvalidTransitionError: If the comment is not pending
        """
        with logfire.span("comment_service.approve_comment", comment_id=comment_id):
            comment = self.get_comment(comment_id)
            context = self.get_context(comment.context)
            approved = self.moderation.approve(comment, actor, context.owner_id)
            saved = self._write(comment_id, {"status": approved.status})
            logfire.info("Comment approved", comment_id=comment_id, actor_id=actor.id)
            return saved

    def toggle_highlight(
        self,
        ref: ContextRef,
        actor: Actor | None,
        kind: HighlightKind,
        comment_id: CommentId,
    ) -> DiscussionContext:
        """Pin / mark best answer, or clear the slot if it already holds comment_id.

        Raises:
            NotFoundError: If the context or comment does not exist
            NotAuthorizedError: If the actor does not own the context
        """
        with logfire.span(
            "comment_service.toggle_highlight",
            context=str(ref),
            kind=kind.value,
            comment_id=comment_id,
        ):
            context = self.get_context(ref)
            updated = self.highlight_selector.toggle(
                context,
                actor,
                kind,
                comment_id,
                self.comment_repository.list_by_context(ref),
            )
            saved = self.context_repository.save(updated)
            logfire.info(
                "Highlight toggled",
                context=str(ref),
                kind=kind.value,
                comment_id=saved.highlight(kind),
            )
            return saved

    # Helpers

    def _write(self, comment_id: CommentId, patch: dict) -> Comment:
        updated = self.comment_repository.update(comment_id, patch)
        if updated is None:
            # Deleted between our read and this write
            logfire.warn("Comment vanished before update", comment_id=comment_id)
            raise NotFoundError("Comment", comment_id)
        return updated

    def _get_visible(
        self,
        comment_id: CommentId,
        actor: Actor | None,
        action: str,
        check_blocks: bool = False,
    ) -> Comment:
        """Load a comment the actor can see; unseen comments are reported missing.

        With check_blocks, a block between the actor and the context owner is
        reported as InteractionBlockedError once the comment is known to be
        visible. A block with the author already hides the comment.
        """
        comment = self.get_comment(comment_id)
        if actor is None:
            raise NotAuthorizedError(action, comment_id, None)
        context = self.get_context(comment.context)
        if not self.visibility_filter.filter([comment], actor, context.owner_id):
            logfire.warn(
                "Comment not visible to actor", comment_id=comment_id, actor_id=actor.id
            )
            raise NotFoundError("Comment", comment_id)
        if check_blocks:
            self._ensure_not_blocked(actor, context.owner_id)
        return comment

    def _ensure_not_blocked(self, actor: Actor, other_id: UserId) -> None:
        if actor.id == other_id:
            return
        if other_id in actor.blocked_ids or self.relationship_repository.are_blocked(
            actor.id, other_id
        ):
            logfire.warn(
                "Interaction refused by blocking relationship",
                user_id=actor.id,
                other_user_id=other_id,
            )
            raise InteractionBlockedError(actor.id, other_id)

    def _drop_highlights(
        self, context: DiscussionContext, deleted: set[CommentId]
    ) -> None:
        updated = context
        for kind in HighlightKind:
            if updated.highlight(kind) in deleted:
                updated = updated.with_highlight(kind, None)
        if updated != context:
            self.context_repository.save(updated)

    @staticmethod
    def _validate_content(content: str) -> str:
        content = content.strip()
        if not content:
            raise ValidationError("Comment content must not be empty")
        if len(content) > MAX_CONTENT_LENGTH:
            raise ValidationError(
                f"Comment content must be at most {MAX_CONTENT_LENGTH} characters"
            )
        return content
