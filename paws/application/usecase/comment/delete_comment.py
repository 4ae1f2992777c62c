"""Delete comment use case."""

from pydantic import BaseModel

from paws.domain.model import Actor
from paws.domain.service import CommentService
from paws.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    actor: Actor | None  # Author, context owner or moderator


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    deleted_ids: list[str]  # Target first, then its replies


class DeleteCommentUseCase:
    """Use case for deleting a comment and every reply beneath it."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor may not delete it
        """
        deleted = self.comment_service.delete_comment(
            CommentId(request.comment_id), request.actor
        )
        return DeleteCommentResponse(deleted_ids=[str(cid) for cid in deleted])
