"""Unit tests for persistence mappers."""

from datetime import datetime

import pytest

from paws.domain.model import DiscussionContext, ModerationRecord
from paws.domain.service import FlagLedger
from paws.domain.value import (
    CommentId,
    CommentStatus,
    FlagReason,
    ReactionKind,
    UserId,
)
from paws.persistence.mappers import (
    apply_comment_patch,
    comment_to_dict,
    context_to_dict,
    row_to_comment,
    row_to_context,
)
from tests.conftest import make_comment, make_ref


class TestCommentMapping:
    """Tests for comment row mapping."""

    def test_json_columns_survive_a_round_trip(self):
        """Reactions, flags and the audit record are stored as JSON documents."""
        # Arrange
        comment = FlagLedger().flag(
            make_comment("c", likes=2),
            UserId("u1"),
            FlagReason.SPAM,
            "ad",
            now=datetime(2026, 3, 3, 10, 0),
        )
        comment = comment.model_copy(
            update={
                "status": CommentStatus.HIDDEN,
                "moderation": ModerationRecord(
                    moderator_id=UserId("mod"),
                    status=CommentStatus.HIDDEN,
                    updated_at=datetime(2026, 3, 3, 11, 0),
                ),
            }
        )

        # Act
        row = comment_to_dict(comment)
        restored = row_to_comment(row)

        # Assert
        assert row["reactions"] == {"like": ["fan-0", "fan-1"]}
        assert row["flags"][0]["flagged_at"] == "2026-03-03T10:00:00"
        assert row["status"] == "hidden"
        assert restored == comment

    def test_missing_json_defaults_to_empty(self):
        row = comment_to_dict(make_comment("c"))
        row["reactions"] = None
        row["flags"] = None

        restored = row_to_comment(row)

        assert restored.reactions == {}
        assert restored.flags == ()


class TestApplyCommentPatch:
    """Tests for partial updates."""

    def test_patch_replaces_named_fields(self):
        comment = make_comment("c")
        reactions = {ReactionKind.WOW: frozenset({UserId("u")})}

        result = apply_comment_patch(comment, {"reactions": reactions})

        assert result.reactions == reactions
        assert result.content == comment.content

    def test_patch_is_validated(self):
        with pytest.raises(ValueError):
            apply_comment_patch(make_comment("c"), {"content": ""})

    @pytest.mark.parametrize("field", ["id", "author_id", "context", "created_at"])
    def test_immutable_fields_are_refused(self, field):
        with pytest.raises(ValueError, match="cannot be patched"):
            apply_comment_patch(make_comment("c"), {field: CommentId("x")})

    def test_unknown_fields_are_refused(self):
        with pytest.raises(ValueError, match="Unknown"):
            apply_comment_patch(make_comment("c"), {"points": 3})


class TestContextMapping:
    """Tests for context row mapping."""

    def test_context_round_trip(self):
        context = DiscussionContext(
            ref=make_ref("7"),
            owner_id=UserId("owner"),
            pinned_comment_id=CommentId("c1"),
        )

        row = context_to_dict(context)

        assert row["context_type"] == "post"
        assert row_to_context(row) == context
