"""Repository interfaces for the comment engine.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from paws.domain.repository.comment import CommentRepository
from paws.domain.repository.context import DiscussionContextRepository
from paws.domain.repository.relationship import RelationshipRepository

__all__ = [
    "CommentRepository",
    "DiscussionContextRepository",
    "RelationshipRepository",
]
