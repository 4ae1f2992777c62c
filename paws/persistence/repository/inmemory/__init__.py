"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .context import InMemoryDiscussionContextRepository
from .relationship import InMemoryRelationshipRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDiscussionContextRepository",
    "InMemoryRelationshipRepository",
]
