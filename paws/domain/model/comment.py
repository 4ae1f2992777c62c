"""Comment entity.

Comments are stored flat, one record per comment, each pointing at its
parent through ``parent_id``. The nested reply tree is never stored; it is
rebuilt from the flat records on every read (see ``TreeBuilder``).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from paws.domain.model.common import DomainModel
from paws.domain.value import (
    CommentId,
    CommentStatus,
    ContextRef,
    FlagReason,
    ReactionKind,
    UserId,
)


class CommentFlag(DomainModel):
    """A user's current report against a comment."""

    user_id: UserId
    reason: FlagReason
    message: Optional[str] = None
    flagged_at: datetime = Field(default_factory=datetime.now)


class ModerationRecord(DomainModel):
    """Audit record of the latest moderator action on a comment."""

    moderator_id: UserId
    status: CommentStatus
    note: Optional[str] = None
    updated_at: datetime = Field(default_factory=datetime.now)


class Comment(DomainModel):
    """Comment entity.

    Represents a comment in a discussion context (post, wiki article or pet
    photo), or a reply to another comment in the same context.

    Business rules:
    - A comment belongs to exactly one context for its lifetime
    - A user appears in at most one reaction set per comment
    - A user has at most one flag per comment
    - ``updated_at`` is only set once the content has been edited
    """

    id: CommentId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    context: ContextRef
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None
    status: CommentStatus = CommentStatus.PUBLISHED
    reactions: dict[ReactionKind, frozenset[UserId]] = Field(default_factory=dict)
    flags: tuple[CommentFlag, ...] = ()
    moderation: Optional[ModerationRecord] = None
    attachment_image_url: Optional[str] = None

    @model_validator(mode="after")
    def check_one_entry_per_user(self) -> "Comment":
        """Reject records with duplicate reactions or flags for a user."""
        seen: set[UserId] = set()
        for user_ids in self.reactions.values():
            if seen & user_ids:
                raise ValueError("A user can only hold one reaction per comment")
            seen |= user_ids

        flaggers = [flag.user_id for flag in self.flags]
        if len(flaggers) != len(set(flaggers)):
            raise ValueError("A user can only hold one flag per comment")
        return self

    @property
    def is_root(self) -> bool:
        """Whether the comment was posted at the top level."""
        return self.parent_id is None

    @property
    def total_reactions(self) -> int:
        """Sum of reactions across all kinds."""
        return sum(len(user_ids) for user_ids in self.reactions.values())

    @property
    def flag_count(self) -> int:
        return len(self.flags)

    @property
    def is_edited(self) -> bool:
        return self.updated_at is not None
