"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire
import pytest

from paws.domain.model import Actor, Comment
from paws.domain.value import (
    CommentId,
    CommentStatus,
    ContextId,
    ContextRef,
    ContextType,
    ReactionKind,
    UserId,
    UserRole,
)

BASE_TIME = datetime(2026, 3, 1, 12, 0, 0)


@pytest.fixture(autouse=True, scope="session")
def quiet_logfire():
    """Keep spans local and off the console during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_ref(
    context_id: str = "42", context_type: ContextType = ContextType.POST
) -> ContextRef:
    """Helper to build a context reference."""
    return ContextRef(context_type=context_type, context_id=ContextId(context_id))


def make_actor(
    user_id: str | None = None,
    role: UserRole = UserRole.USER,
    blocked: tuple[str, ...] = (),
) -> Actor:
    """Helper to build an actor with an optional client-side block list."""
    return Actor(
        id=UserId(user_id or f"user-{uuid4().hex[:8]}"),
        role=role,
        blocked_ids=frozenset(UserId(b) for b in blocked),
    )


def make_comment(
    comment_id: str,
    author_id: str = "alice",
    parent_id: str | None = None,
    minutes: int = 0,
    status: CommentStatus = CommentStatus.PUBLISHED,
    likes: int = 0,
    ref: ContextRef | None = None,
    content: str | None = None,
) -> Comment:
    """Helper to build a comment.

    Args:
        comment_id: Comment ID
        author_id: Author user ID
        parent_id: Parent comment ID for replies
        minutes: Offset from BASE_TIME, so tests can order comments
        status: Moderation status
        likes: Number of distinct users who reacted with "like"
        ref: Discussion context (defaults to post:42)
        content: Comment text (defaults to a text naming the ID)
    """
    reactions = {}
    if likes:
        reactions[ReactionKind.LIKE] = frozenset(
            UserId(f"fan-{i}") for i in range(likes)
        )
    return Comment(
        id=CommentId(comment_id),
        author_id=UserId(author_id),
        content=content if content is not None else f"Comment {comment_id}",
        context=ref or make_ref(),
        parent_id=CommentId(parent_id) if parent_id else None,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        status=status,
        reactions=reactions,
    )
