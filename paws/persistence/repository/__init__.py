"""SQL repository implementations."""

from paws.persistence.repository.comment import SqlCommentRepository
from paws.persistence.repository.context import SqlDiscussionContextRepository
from paws.persistence.repository.relationship import SqlRelationshipRepository

__all__ = [
    "SqlCommentRepository",
    "SqlDiscussionContextRepository",
    "SqlRelationshipRepository",
]
