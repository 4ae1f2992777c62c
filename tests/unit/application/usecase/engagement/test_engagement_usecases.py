"""Unit tests for reactions, flags and highlights."""

import pytest

from paws.application.usecase.flag import (
    FlagCommentRequest,
    FlagCommentUseCase,
    WithdrawFlagRequest,
    WithdrawFlagUseCase,
)
from paws.application.usecase.highlight import (
    ToggleHighlightRequest,
    ToggleHighlightUseCase,
)
from paws.application.usecase.reaction import (
    ToggleReactionRequest,
    ToggleReactionUseCase,
)
from paws.domain.error import InteractionBlockedError, NotAuthorizedError
from paws.domain.repository import RelationshipRepository
from paws.domain.service import CommentService
from paws.domain.value import FlagReason, HighlightKind, ReactionKind
from tests.conftest import make_actor, make_ref
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

REF = make_ref("caring-for-cats")
OWNER = make_actor("owner")
ALICE = make_actor("alice")
BOB = make_actor("bob")


@pytest.fixture
def comment(unit_env):
    service = unit_env.get(CommentService)
    service.open_context(REF, OWNER.id)
    return service.create_comment(REF, ALICE, "Cats love cardboard boxes")


def react(unit_env, comment_id, actor, kind):
    return unit_env.get(ToggleReactionUseCase).execute(
        ToggleReactionRequest(comment_id=comment_id, actor=actor, kind=kind)
    )


def highlight(unit_env, actor, kind, comment_id):
    return unit_env.get(ToggleHighlightUseCase).execute(
        ToggleHighlightRequest(
            context_type=REF.context_type,
            context_id=REF.context_id,
            actor=actor,
            kind=kind,
            comment_id=comment_id,
        )
    )


class TestToggleReactionUseCase:
    """Tests for ToggleReactionUseCase."""

    def test_react_switch_and_remove(self, unit_env, comment):
        first = react(unit_env, comment.id, BOB, ReactionKind.LIKE)
        assert first.user_reaction == ReactionKind.LIKE
        assert first.comment.reactions == {ReactionKind.LIKE: 1}

        switched = react(unit_env, comment.id, BOB, ReactionKind.LAUGH)
        assert switched.user_reaction == ReactionKind.LAUGH
        assert switched.comment.reactions == {ReactionKind.LAUGH: 1}
        assert switched.comment.total_reactions == 1

        removed = react(unit_env, comment.id, BOB, ReactionKind.LAUGH)
        assert removed.user_reaction is None
        assert removed.comment.total_reactions == 0

    def test_user_blocked_by_owner_cannot_react(self, unit_env, comment):
        unit_env.get(RelationshipRepository).block(OWNER.id, BOB.id)

        with pytest.raises(InteractionBlockedError):
            react(unit_env, comment.id, BOB, ReactionKind.LIKE)

    def test_anonymous_cannot_react(self, unit_env, comment):
        with pytest.raises(NotAuthorizedError):
            react(unit_env, comment.id, None, ReactionKind.LIKE)


class TestFlagUseCases:
    """Tests for FlagCommentUseCase and WithdrawFlagUseCase."""

    def test_flag_replaces_previous_flag(self, unit_env, comment):
        use_case = unit_env.get(FlagCommentUseCase)
        use_case.execute(
            FlagCommentRequest(
                comment_id=comment.id, actor=BOB, reason=FlagReason.SPAM
            )
        )

        response = use_case.execute(
            FlagCommentRequest(
                comment_id=comment.id,
                actor=BOB,
                reason=FlagReason.OTHER,
                message="Not about cats",
            )
        )

        assert response.comment.flag_count == 1

    def test_withdraw_removes_own_flag(self, unit_env, comment):
        unit_env.get(FlagCommentUseCase).execute(
            FlagCommentRequest(
                comment_id=comment.id, actor=BOB, reason=FlagReason.SPAM
            )
        )

        response = unit_env.get(WithdrawFlagUseCase).execute(
            WithdrawFlagRequest(comment_id=comment.id, actor=BOB)
        )

        assert response.comment.flag_count == 0


class TestToggleHighlightUseCase:
    """Tests for ToggleHighlightUseCase."""

    def test_pin_then_unpin(self, unit_env, comment):
        pinned = highlight(unit_env, OWNER, HighlightKind.PINNED, comment.id)
        assert pinned.comment_id == comment.id
        assert pinned.pinned_comment_id == comment.id
        assert pinned.best_answer_comment_id is None

        cleared = highlight(unit_env, OWNER, HighlightKind.PINNED, comment.id)
        assert cleared.comment_id is None
        assert cleared.pinned_comment_id is None

    def test_only_owner_can_highlight(self, unit_env, comment):
        with pytest.raises(NotAuthorizedError):
            highlight(unit_env, ALICE, HighlightKind.BEST_ANSWER, comment.id)
