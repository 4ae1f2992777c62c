"""Get moderation queue use case."""

from datetime import datetime

from pydantic import BaseModel

from paws.application.usecase.comment.summary import CommentSummary
from paws.domain.model import Actor
from paws.domain.service import CommentService
from paws.domain.value import ContextId, ContextRef, ContextType, FlagReason


class FlagItem(BaseModel):
    """A single report against a comment."""

    user_id: str
    reason: FlagReason
    message: str | None
    flagged_at: datetime


class QueueItem(BaseModel):
    """Comment awaiting review."""

    comment: CommentSummary
    flags: list[FlagItem]


class GetModerationQueueRequest(BaseModel):
    """Get moderation queue request."""

    context_type: ContextType
    context_id: str
    actor: Actor | None  # Context owner or moderator


class GetModerationQueueResponse(BaseModel):
    """Get moderation queue response."""

    items: list[QueueItem]
    total: int


class GetModerationQueueUseCase:
    """Use case for listing pending and flagged comments of a context."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    def execute(self, request: GetModerationQueueRequest) -> GetModerationQueueResponse:
        """Execute get moderation queue flow.

        Returns:
            Queue ordered most-flagged first, then oldest first

        Raises:
            NotFoundError: If the context does not exist
            NotAuthorizedError: If the actor cannot moderate the context
        """
        queue = self.comment_service.moderation_queue(
            ContextRef(
                context_type=request.context_type,
                context_id=ContextId(request.context_id),
            ),
            request.actor,
        )

        items = [
            QueueItem(
                comment=CommentSummary.from_comment(comment),
                flags=[
                    FlagItem(
                        user_id=str(flag.user_id),
                        reason=flag.reason,
                        message=flag.message,
                        flagged_at=flag.flagged_at,
                    )
                    for flag in comment.flags
                ],
            )
            for comment in queue
        ]
        return GetModerationQueueResponse(items=items, total=len(items))
