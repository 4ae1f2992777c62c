"""Approve comment use case."""

from pydantic import BaseModel

from paws.application.usecase.comment.summary import CommentSummary
from paws.domain.model import Actor
from paws.domain.service import CommentService
from paws.domain.value import CommentId


class ApproveCommentRequest(BaseModel):
    """Approve comment request."""

    comment_id: str
    actor: Actor | None  # Context owner or moderator


class ApproveCommentResponse(BaseModel):
    """Approve comment response."""

    comment: CommentSummary


class ApproveCommentUseCase:
    """Use case for quick-approving a comment held for review.

    Unlike a full moderation action, no audit record is written.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    def execute(self, request: ApproveCommentRequest) -> ApproveCommentResponse:
        comment = self.comment_service.approve_comment(
            CommentId(request.comment_id), request.actor
        )
        return ApproveCommentResponse(comment=CommentSummary.from_comment(comment))
