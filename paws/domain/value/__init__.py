"""Domain value objects for the comment engine."""

from paws.domain.value.identifiers import CommentId, ContextId, UserId
from paws.domain.value.types import (
    CommentStatus,
    ContextRef,
    ContextType,
    FlagReason,
    HighlightKind,
    ReactionKind,
    SortMode,
    UserRole,
)

__all__ = [
    # Identifiers
    "CommentId",
    "ContextId",
    "UserId",
    # Types
    "CommentStatus",
    "ContextRef",
    "ContextType",
    "FlagReason",
    "HighlightKind",
    "ReactionKind",
    "SortMode",
    "UserRole",
]
