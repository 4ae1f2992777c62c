"""Create comment use case."""

from pydantic import BaseModel

from paws.application.usecase.base import BaseUseCase
from paws.domain.model import Actor
from paws.domain.service import CommentService
from paws.domain.value import (
    CommentId,
    CommentStatus,
    ContextId,
    ContextRef,
    ContextType,
)

from .summary import CommentSummary


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    context_type: ContextType
    context_id: str
    actor: Actor | None  # Author; anonymous requests are refused
    content: str
    parent_id: str | None = None  # Parent comment ID for replies
    attachment_image_url: str | None = None


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentSummary
    is_pending: bool  # Held for review because the author is restricted


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a context or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Created comment and whether it awaits review

        Raises:
            NotFoundError: If the context or parent comment does not exist
            NotAuthorizedError: If the request is anonymous
            InteractionBlockedError: If the author and context owner are blocked
            ValidationError: If content is invalid or the parent is elsewhere
        """
        comment = self.comment_service.create_comment(
            ref=ContextRef(
                context_type=request.context_type,
                context_id=ContextId(request.context_id),
            ),
            actor=request.actor,
            content=request.content,
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
            attachment_image_url=request.attachment_image_url,
        )

        return CreateCommentResponse(
            comment=CommentSummary.from_comment(comment),
            is_pending=comment.status == CommentStatus.PENDING,
        )
