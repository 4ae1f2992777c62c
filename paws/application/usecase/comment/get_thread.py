"""Get thread use case."""

from datetime import datetime

from pydantic import BaseModel

from paws.application.usecase.base import BaseUseCase
from paws.domain.model import Actor
from paws.domain.service import (
    CommentNode,
    CommentService,
    FlagLedger,
    PermissionEvaluator,
    ReactionLedger,
    walk,
)
from paws.domain.value import (
    CommentStatus,
    ContextId,
    ContextRef,
    ContextType,
    FlagReason,
    ReactionKind,
    SortMode,
    UserId,
)


class CommentItem(BaseModel):
    """Comment node in response, with the viewer-specific derived fields."""

    comment_id: str
    author_id: str
    content: str | None  # None when redacted
    attachment_image_url: str | None
    parent_id: str | None
    depth: int
    status: CommentStatus
    created_at: datetime
    updated_at: datetime | None
    is_edited: bool
    is_hidden: bool
    is_pending: bool
    is_pinned: bool
    is_best_answer: bool
    reactions: dict[ReactionKind, int]
    total_reactions: int
    user_reaction: ReactionKind | None
    user_flag: FlagReason | None
    flag_count: int | None  # Only reported to moderators
    can_edit: bool
    can_delete: bool
    can_moderate: bool
    children: list["CommentItem"] = []


class GetThreadRequest(BaseModel):
    """Get thread request."""

    context_type: ContextType
    context_id: str
    actor: Actor | None = None  # None for anonymous viewers
    sort_mode: SortMode | None = None  # Falls back to the configured default


class GetThreadResponse(BaseModel):
    """Get thread response."""

    context_type: ContextType
    context_id: str
    owner_id: str
    comments: list[CommentItem]
    pinned: CommentItem | None
    best_answer: CommentItem | None
    visible_count: int  # Rendered comments that are not hidden
    total: int  # Rendered comments


class GetThreadUseCase(BaseUseCase):
    """Use case for rendering the reply forest of a discussion context."""

    def __init__(
        self,
        comment_service: CommentService,
        permissions: PermissionEvaluator,
        reaction_ledger: ReactionLedger,
        flag_ledger: FlagLedger,
    ) -> None:
        """Initialize get thread use case.

        Args:
            comment_service: Comment domain service
            permissions: Permission predicates for per-node affordances
            reaction_ledger: Reaction lookup for the viewer's own reaction
            flag_ledger: Flag lookup for the viewer's own flag
        """
        self.comment_service = comment_service
        self.permissions = permissions
        self.reaction_ledger = reaction_ledger
        self.flag_ledger = flag_ledger

    def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Hidden comments stay in place so replies keep their parent, but their
        content and attachment are withheld from viewers who cannot moderate.

        Args:
            request: Context reference, viewer and sort mode

        Returns:
            Nested comment items with highlight slots and counts
        """
        ref = ContextRef(
            context_type=request.context_type,
            context_id=ContextId(request.context_id),
        )
        thread = self.comment_service.get_thread(ref, request.actor, request.sort_mode)
        context = thread.context
        can_moderate = self.permissions.can_moderate(request.actor, context.owner_id)
        viewer_id = request.actor.id if request.actor else None

        # Children come before their parent in reversed pre-order
        items: dict[str, CommentItem] = {}
        for node in reversed(list(walk(thread.nodes))):
            items[node.id] = self._to_item(
                node,
                children=[items[child.id] for child in node.children],
                actor=request.actor,
                viewer_id=viewer_id,
                owner_id=context.owner_id,
                can_moderate=can_moderate,
                pinned_id=context.pinned_comment_id,
                best_answer_id=context.best_answer_comment_id,
            )

        pinned = thread.highlights.pinned
        best_answer = thread.highlights.best_answer
        hidden = sum(1 for item in items.values() if item.is_hidden)

        return GetThreadResponse(
            context_type=ref.context_type,
            context_id=str(ref.context_id),
            owner_id=str(context.owner_id),
            comments=[items[node.id] for node in thread.nodes],
            pinned=items[pinned.id] if pinned else None,
            best_answer=items[best_answer.id] if best_answer else None,
            visible_count=len(items) - hidden,
            total=len(items),
        )

    def _to_item(
        self,
        node: CommentNode,
        children: list[CommentItem],
        actor: Actor | None,
        viewer_id: UserId | None,
        owner_id: UserId,
        can_moderate: bool,
        pinned_id: str | None,
        best_answer_id: str | None,
    ) -> CommentItem:
        comment = node.comment
        is_hidden = comment.status == CommentStatus.HIDDEN
        redacted = is_hidden and not can_moderate
        user_flag = self.flag_ledger.flag_of(comment, viewer_id)

        return CommentItem(
            comment_id=str(comment.id),
            author_id=str(comment.author_id),
            content=None if redacted else comment.content,
            attachment_image_url=None if redacted else comment.attachment_image_url,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=node.depth,
            status=comment.status,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            is_edited=comment.is_edited,
            is_hidden=is_hidden,
            is_pending=comment.status == CommentStatus.PENDING,
            is_pinned=comment.id == pinned_id,
            is_best_answer=comment.id == best_answer_id,
            reactions=self.reaction_ledger.counts(comment),
            total_reactions=comment.total_reactions,
            user_reaction=self.reaction_ledger.reaction_of(comment, viewer_id),
            user_flag=user_flag.reason if user_flag else None,
            flag_count=comment.flag_count if can_moderate else None,
            can_edit=self.permissions.can_edit(comment, actor),
            can_delete=self.permissions.can_delete(comment, actor, owner_id),
            can_moderate=can_moderate,
            children=children,
        )
