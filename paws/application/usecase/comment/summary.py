"""Flat comment representation shared by the mutation use cases."""

from datetime import datetime

from pydantic import BaseModel

from paws.domain.model import Comment
from paws.domain.value import CommentStatus, ContextType, ReactionKind


class CommentSummary(BaseModel):
    """A single comment as returned after a write."""

    comment_id: str
    context_type: ContextType
    context_id: str
    author_id: str
    content: str
    parent_id: str | None
    status: CommentStatus
    reactions: dict[ReactionKind, int]
    total_reactions: int
    flag_count: int
    attachment_image_url: str | None
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentSummary":
        return cls(
            comment_id=str(comment.id),
            context_type=comment.context.context_type,
            context_id=str(comment.context.context_id),
            author_id=str(comment.author_id),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            status=comment.status,
            reactions={
                kind: len(user_ids)
                for kind, user_ids in comment.reactions.items()
                if user_ids
            },
            total_reactions=comment.total_reactions,
            flag_count=comment.flag_count,
            attachment_image_url=comment.attachment_image_url,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
