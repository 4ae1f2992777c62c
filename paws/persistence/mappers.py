"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Mapping

from paws.domain.model import Comment, DiscussionContext
from paws.domain.value import ContextRef, ContextType

# Fields a patch may never touch: identity, authorship and placement
IMMUTABLE_COMMENT_FIELDS = frozenset({"id", "author_id", "context", "created_at"})


def row_to_comment(row: Mapping[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as mapping

    Returns:
        Comment domain model
    """
    return Comment.model_validate(
        {
            "id": row["id"],
            "author_id": row["author_id"],
            "content": row["content"],
            "context": ContextRef(
                context_type=ContextType(row["context_type"]),
                context_id=row["context_id"],
            ),
            "parent_id": row["parent_id"],
            "created_at": row["created_at"],
            "updated_at": row["updated_at"],
            "status": row["status"],
            "reactions": row["reactions"] or {},
            "flags": row["flags"] or [],
            "moderation": row["moderation"],
            "attachment_image_url": row["attachment_image_url"],
        }
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Reactions, flags and the moderation record are stored as JSON documents,
    so they are dumped in JSON mode (datetimes become ISO strings).

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": comment.id,
        "context_type": comment.context.context_type.value,
        "context_id": comment.context.context_id,
        "parent_id": comment.parent_id,
        "author_id": comment.author_id,
        "content": comment.content,
        "status": comment.status.value,
        "reactions": {
            kind.value: sorted(user_ids)
            for kind, user_ids in comment.reactions.items()
            if user_ids
        },
        "flags": [flag.model_dump(mode="json") for flag in comment.flags],
        "moderation": (
            comment.moderation.model_dump(mode="json") if comment.moderation else None
        ),
        "attachment_image_url": comment.attachment_image_url,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def apply_comment_patch(comment: Comment, patch: Mapping[str, Any]) -> Comment:
    """Return a new comment with the patch applied and re-validated.

    Args:
        comment: Current stored comment
        patch: Field name to new value

    Returns:
        Updated comment

    Raises:
        ValueError: If the patch names unknown or immutable fields
    """
    unknown = set(patch) - set(Comment.model_fields)
    if unknown:
        raise ValueError(f"Unknown comment fields in patch: {sorted(unknown)}")
    frozen = set(patch) & IMMUTABLE_COMMENT_FIELDS
    if frozen:
        raise ValueError(f"Comment fields cannot be patched: {sorted(frozen)}")

    data = {name: getattr(comment, name) for name in Comment.model_fields}
    data.update(patch)
    return Comment.model_validate(data)


def row_to_context(row: Mapping[str, Any]) -> DiscussionContext:
    """Convert database row to DiscussionContext domain model."""
    return DiscussionContext(
        ref=ContextRef(
            context_type=ContextType(row["context_type"]),
            context_id=row["context_id"],
        ),
        owner_id=row["owner_id"],
        pinned_comment_id=row["pinned_comment_id"],
        best_answer_comment_id=row["best_answer_comment_id"],
    )


def context_to_dict(context: DiscussionContext) -> Dict[str, Any]:
    """Convert DiscussionContext domain model to database dict."""
    return {
        "context_type": context.ref.context_type.value,
        "context_id": context.ref.context_id,
        "owner_id": context.owner_id,
        "pinned_comment_id": context.pinned_comment_id,
        "best_answer_comment_id": context.best_answer_comment_id,
    }
