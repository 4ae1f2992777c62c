"""Toggle highlight use case."""

from pydantic import BaseModel

from paws.domain.model import Actor
from paws.domain.service import CommentService
from paws.domain.value import (
    CommentId,
    ContextId,
    ContextRef,
    ContextType,
    HighlightKind,
)


class ToggleHighlightRequest(BaseModel):
    """Toggle highlight request."""

    context_type: ContextType
    context_id: str
    actor: Actor | None  # Must own the context
    kind: HighlightKind
    comment_id: str


class ToggleHighlightResponse(BaseModel):
    """Toggle highlight response."""

    kind: HighlightKind
    comment_id: str | None  # None when the toggle cleared the slot
    pinned_comment_id: str | None
    best_answer_comment_id: str | None


class ToggleHighlightUseCase:
    """Use case for pinning a comment or marking it as the best answer.

    Selecting the comment already in the slot clears the slot.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    def execute(self, request: ToggleHighlightRequest) -> ToggleHighlightResponse:
        """Execute toggle highlight flow.

        Raises:
            NotFoundError: If the context or comment does not exist
            NotAuthorizedError: If the actor does not own the context
        """
        context = self.comment_service.toggle_highlight(
            ContextRef(
                context_type=request.context_type,
                context_id=ContextId(request.context_id),
            ),
            request.actor,
            request.kind,
            CommentId(request.comment_id),
        )
        return ToggleHighlightResponse(
            kind=request.kind,
            comment_id=context.highlight(request.kind),
            pinned_comment_id=context.pinned_comment_id,
            best_answer_comment_id=context.best_answer_comment_id,
        )
