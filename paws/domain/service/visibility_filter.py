"""Visibility filter for comment threads."""

import logfire

from paws.domain.model import Actor, Comment
from paws.domain.repository import RelationshipRepository
from paws.domain.value import CommentStatus, UserId

from .base import Service


class VisibilityFilter(Service):
    """Decides which comments of a context a viewer may see at all.

    Rules, in order:
    1. Anonymous viewers never see pending comments
    2. Comments whose author and the viewer are blocked (either direction)
       are removed entirely; blocking is opacity, not a placeholder
    3. Pending comments are visible only to their author, the context owner
       and moderators

    Hidden comments are kept: they render as redacted placeholders so reply
    counts under a hidden parent stay accurate.
    """

    def __init__(self, relationship_repository: RelationshipRepository) -> None:
        """Initialize visibility filter.

        Args:
            relationship_repository: Blocking relationship lookup
        """
        self.relationship_repository = relationship_repository

    def filter(
        self,
        comments: list[Comment],
        viewer: Actor | None,
        context_owner_id: UserId,
    ) -> list[Comment]:
        """Return the subset of comments the viewer may see.

        Args:
            comments: Flat list of comments of one context
            viewer: The viewing actor, or None when anonymous
            context_owner_id: Owner of the discussion context

        Returns:
            Visible comments, in input order
        """
        with logfire.span(
            "visibility_filter.filter",
            viewer_id=viewer.id if viewer else None,
            count=len(comments),
        ):
            if viewer is None:
                visible = [c for c in comments if c.status != CommentStatus.PENDING]
            else:
                # One oracle lookup per distinct author
                blocked_authors: dict[UserId, bool] = {}

                def is_blocked(author_id: UserId) -> bool:
                    if author_id == viewer.id:
                        return False
                    if author_id not in blocked_authors:
                        blocked_authors[author_id] = (
                            author_id in viewer.blocked_ids
                            or self.relationship_repository.are_blocked(
                                viewer.id, author_id
                            )
                        )
                    return blocked_authors[author_id]

                sees_all_pending = viewer.is_moderator or viewer.id == context_owner_id
                visible = [
                    c
                    for c in comments
                    if not is_blocked(c.author_id)
                    and (
                        c.status != CommentStatus.PENDING
                        or sees_all_pending
                        or c.author_id == viewer.id
                    )
                ]

            logfire.debug(
                "Comments filtered for viewer",
                visible=len(visible),
                removed=len(comments) - len(visible),
            )
            return visible
