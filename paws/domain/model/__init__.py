"""Domain model entities for the comment engine."""

from paws.domain.model.actor import Actor
from paws.domain.model.comment import Comment, CommentFlag, ModerationRecord
from paws.domain.model.context import DiscussionContext

__all__ = [
    "Actor",
    "Comment",
    "CommentFlag",
    "DiscussionContext",
    "ModerationRecord",
]
