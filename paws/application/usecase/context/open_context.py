"""Open discussion context use case."""

from pydantic import BaseModel

from paws.domain.service import CommentService
from paws.domain.value import ContextId, ContextRef, ContextType, UserId


class OpenContextRequest(BaseModel):
    """Open context request."""

    context_type: ContextType
    context_id: str
    owner_id: str  # Owner of the post, wiki article or photo


class OpenContextResponse(BaseModel):
    """Open context response."""

    context_type: ContextType
    context_id: str
    owner_id: str
    pinned_comment_id: str | None
    best_answer_comment_id: str | None


class OpenContextUseCase:
    """Use case for registering a discussion context before it takes comments.

    Idempotent: opening an existing context returns it unchanged, including
    its original owner.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    def execute(self, request: OpenContextRequest) -> OpenContextResponse:
        context = self.comment_service.open_context(
            ContextRef(
                context_type=request.context_type,
                context_id=ContextId(request.context_id),
            ),
            UserId(request.owner_id),
        )
        return OpenContextResponse(
            context_type=context.ref.context_type,
            context_id=str(context.ref.context_id),
            owner_id=str(context.owner_id),
            pinned_comment_id=context.pinned_comment_id,
            best_answer_comment_id=context.best_answer_comment_id,
        )
