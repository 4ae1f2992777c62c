"""Unit tests for ReactionLedger."""

from paws.domain.service import ReactionLedger
from paws.domain.value import ReactionKind, UserId
from tests.conftest import make_comment

USER = UserId("u1")


class TestToggle:
    """Tests for the react / switch / un-react cycle."""

    def test_first_reaction_is_added(self):
        ledger = ReactionLedger()

        result = ledger.toggle(make_comment("c"), USER, ReactionKind.LOVE)

        assert ledger.reaction_of(result, USER) == ReactionKind.LOVE
        assert result.total_reactions == 1

    def test_same_kind_again_removes_reaction(self):
        ledger = ReactionLedger()
        reacted = ledger.toggle(make_comment("c"), USER, ReactionKind.LOVE)

        result = ledger.toggle(reacted, USER, ReactionKind.LOVE)

        assert ledger.reaction_of(result, USER) is None
        assert result.reactions == {}

    def test_other_kind_switches_reaction(self):
        """Switching never leaves the user in two reaction sets."""
        # Arrange
        ledger = ReactionLedger()
        comment = make_comment("c", likes=2)
        reacted = ledger.toggle(comment, USER, ReactionKind.LIKE)

        # Act
        result = ledger.toggle(reacted, USER, ReactionKind.LAUGH)

        # Assert
        assert ledger.counts(result) == {ReactionKind.LIKE: 2, ReactionKind.LAUGH: 1}
        assert result.total_reactions == 3
        assert USER not in result.reactions[ReactionKind.LIKE]

    def test_toggle_does_not_mutate_input(self):
        ledger = ReactionLedger()
        comment = make_comment("c")

        ledger.toggle(comment, USER, ReactionKind.WOW)

        assert comment.reactions == {}

    def test_reaction_of_anonymous_is_none(self):
        ledger = ReactionLedger()

        assert ledger.reaction_of(make_comment("c", likes=1), None) is None
