"""Update comment use case."""

from pydantic import BaseModel

from paws.domain.model import Actor
from paws.domain.service import CommentService
from paws.domain.value import CommentId

from .summary import CommentSummary


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str
    actor: Actor | None  # Must be the author
    content: str  # New content (required, cannot be empty)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentSummary


class UpdateCommentUseCase:
    """Use case for editing the content of a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the author
            ValidationError: If the new content is invalid
        """
        comment = self.comment_service.edit_comment(
            CommentId(request.comment_id), request.actor, request.content
        )
        return UpdateCommentResponse(comment=CommentSummary.from_comment(comment))
