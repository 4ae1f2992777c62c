"""Toggle reaction use case."""

from pydantic import BaseModel

from paws.application.usecase.comment.summary import CommentSummary
from paws.domain.model import Actor
from paws.domain.service import CommentService, ReactionLedger
from paws.domain.value import CommentId, ReactionKind


class ToggleReactionRequest(BaseModel):
    """Toggle reaction request."""

    comment_id: str
    actor: Actor | None
    kind: ReactionKind


class ToggleReactionResponse(BaseModel):
    """Toggle reaction response."""

    comment: CommentSummary
    user_reaction: ReactionKind | None  # None when the toggle removed it


class ToggleReactionUseCase:
    """Use case for reacting to a comment, switching or removing a reaction.

    Reacting with the kind the user already holds removes it; reacting with
    a different kind switches to it.
    """

    def __init__(
        self, comment_service: CommentService, reaction_ledger: ReactionLedger
    ) -> None:
        """Initialize toggle reaction use case.

        Args:
            comment_service: Comment domain service
            reaction_ledger: Reaction lookup for the caller's resulting state
        """
        self.comment_service = comment_service
        self.reaction_ledger = reaction_ledger

    def execute(self, request: ToggleReactionRequest) -> ToggleReactionResponse:
        """Execute toggle reaction flow.

        Raises:
            NotFoundError: If the comment does not exist or is not visible
            NotAuthorizedError: If the request is anonymous
            InteractionBlockedError: If a block separates the actor and author
        """
        comment = self.comment_service.toggle_reaction(
            CommentId(request.comment_id), request.actor, request.kind
        )
        return ToggleReactionResponse(
            comment=CommentSummary.from_comment(comment),
            user_reaction=self.reaction_ledger.reaction_of(comment, request.actor.id),
        )
