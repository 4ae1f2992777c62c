"""Moderate comment use case."""

from datetime import datetime

from pydantic import BaseModel

from paws.application.usecase.base import BaseUseCase
from paws.application.usecase.comment.summary import CommentSummary
from paws.domain.model import Actor
from paws.domain.service import CommentService
from paws.domain.value import CommentId, CommentStatus


class ModerateCommentRequest(BaseModel):
    """Moderate comment request."""

    comment_id: str
    actor: Actor | None  # Context owner or moderator
    status: CommentStatus  # Target status
    note: str | None = None  # Stored on the audit record
    clear_flags: bool = False  # Dismiss outstanding flags as part of the action


class ModerateCommentResponse(BaseModel):
    """Moderate comment response."""

    comment: CommentSummary
    moderator_id: str
    moderation_note: str | None
    moderated_at: datetime


class ModerateCommentUseCase(BaseUseCase):
    """Use case for publishing, hiding or holding a comment on review."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize moderate comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    def execute(self, request: ModerateCommentRequest) -> ModerateCommentResponse:
        """Execute moderate comment flow.

        Args:
            request: Moderation action

        Returns:
            Updated comment and the audit record written for it

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor cannot moderate the context
            InvalidTransitionError: If the status change is not allowed
        """
        comment = self.comment_service.moderate_comment(
            CommentId(request.comment_id),
            request.actor,
            request.status,
            note=request.note,
            clear_flags=request.clear_flags,
        )
        record = comment.moderation

        return ModerateCommentResponse(
            comment=CommentSummary.from_comment(comment),
            moderator_id=str(record.moderator_id),
            moderation_note=record.note,
            moderated_at=record.updated_at,
        )
