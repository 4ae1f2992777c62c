"""Withdraw flag use case."""

from pydantic import BaseModel

from paws.application.usecase.comment.summary import CommentSummary
from paws.domain.model import Actor
from paws.domain.service import CommentService
from paws.domain.value import CommentId


class WithdrawFlagRequest(BaseModel):
    """Withdraw flag request."""

    comment_id: str
    actor: Actor | None


class WithdrawFlagResponse(BaseModel):
    """Withdraw flag response."""

    comment: CommentSummary


class WithdrawFlagUseCase:
    """Use case for removing the caller's own flag from a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    def execute(self, request: WithdrawFlagRequest) -> WithdrawFlagResponse:
        comment = self.comment_service.withdraw_flag(
            CommentId(request.comment_id), request.actor
        )
        return WithdrawFlagResponse(comment=CommentSummary.from_comment(comment))
