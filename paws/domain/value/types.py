"""Domain value objects for the comment engine.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from paws.domain.value.common import ValueObject
from paws.domain.value.identifiers import ContextId


class ContextType(str, Enum):
    """Kind of discussion surface a comment belongs to."""

    POST = "post"
    WIKI = "wiki"
    PHOTO = "photo"


class CommentStatus(str, Enum):
    """Moderation lifecycle state of a comment."""

    PUBLISHED = "published"
    PENDING = "pending"
    HIDDEN = "hidden"


class ReactionKind(str, Enum):
    """Reactions a user can leave on a comment (one at a time)."""

    LIKE = "like"
    LOVE = "love"
    LAUGH = "laugh"
    WOW = "wow"
    SAD = "sad"
    ANGRY = "angry"


class FlagReason(str, Enum):
    """Why a user reported a comment."""

    SPAM = "spam"
    HARASSMENT = "harassment"
    OFF_TOPIC = "off-topic"
    MISINFORMATION = "misinformation"
    OTHER = "other"


class UserRole(str, Enum):
    """Role of the acting user."""

    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"


class SortMode(str, Enum):
    """Ordering of root comments in a thread."""

    TOP = "top"
    NEWEST = "newest"


class HighlightKind(str, Enum):
    """Fixed display slots above a thread."""

    PINNED = "pinned"
    BEST_ANSWER = "best_answer"


class ContextRef(ValueObject):
    """Reference to the single discussion context a comment lives in.

    Examples: post:42, wiki:caring-for-cats, photo:pet-7:3
    """

    context_type: ContextType
    context_id: ContextId

    @field_validator("context_id")
    @classmethod
    def validate_context_id(cls, v: str) -> str:
        """Validate context id is not blank."""
        if not v.strip():
            raise ValueError("Context id must not be empty")
        return v

    def __str__(self) -> str:
        return f"{self.context_type.value}:{self.context_id}"
