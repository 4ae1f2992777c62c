"""Flag comment use case."""

from pydantic import BaseModel

from paws.application.usecase.comment.summary import CommentSummary
from paws.domain.model import Actor
from paws.domain.service import CommentService
from paws.domain.value import CommentId, FlagReason


class FlagCommentRequest(BaseModel):
    """Flag comment request."""

    comment_id: str
    actor: Actor | None
    reason: FlagReason
    message: str | None = None  # Optional free-text context for moderators


class FlagCommentResponse(BaseModel):
    """Flag comment response."""

    comment: CommentSummary


class FlagCommentUseCase:
    """Use case for reporting a comment to moderators.

    Flagging again replaces the caller's earlier flag.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    def execute(self, request: FlagCommentRequest) -> FlagCommentResponse:
        comment = self.comment_service.flag_comment(
            CommentId(request.comment_id),
            request.actor,
            request.reason,
            request.message,
        )
        return FlagCommentResponse(comment=CommentSummary.from_comment(comment))
