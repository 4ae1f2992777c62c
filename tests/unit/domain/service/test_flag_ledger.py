"""Unit tests for FlagLedger."""

from datetime import datetime

from paws.domain.service import FlagLedger
from paws.domain.value import FlagReason, UserId
from tests.conftest import make_comment

FIRST = datetime(2026, 3, 1, 9, 0)
LATER = datetime(2026, 3, 2, 9, 0)


class TestFlag:
    """Tests for recording flags."""

    def test_new_flaggers_are_appended(self):
        ledger = FlagLedger()
        comment = ledger.flag(make_comment("c"), UserId("a"), FlagReason.SPAM)

        result = ledger.flag(comment, UserId("b"), FlagReason.HARASSMENT)

        assert [f.user_id for f in result.flags] == ["a", "b"]
        assert result.flag_count == 2

    def test_reflag_replaces_in_place(self):
        """Second flag by the same user replaces the first, keeping its slot."""
        # Arrange
        ledger = FlagLedger()
        comment = ledger.flag(make_comment("c"), UserId("a"), FlagReason.SPAM, now=FIRST)
        comment = ledger.flag(comment, UserId("b"), FlagReason.OTHER, now=FIRST)

        # Act
        result = ledger.flag(
            comment, UserId("a"), FlagReason.OFF_TOPIC, "wrong thread", now=LATER
        )

        # Assert
        assert result.flag_count == 2
        first = result.flags[0]
        assert first.user_id == "a"
        assert first.reason == FlagReason.OFF_TOPIC
        assert first.message == "wrong thread"
        assert first.flagged_at == LATER

    def test_flag_of_returns_users_flag(self):
        ledger = FlagLedger()
        comment = ledger.flag(make_comment("c"), UserId("a"), FlagReason.MISINFORMATION)

        assert ledger.flag_of(comment, UserId("a")).reason == FlagReason.MISINFORMATION
        assert ledger.flag_of(comment, UserId("b")) is None
        assert ledger.flag_of(comment, None) is None


class TestWithdrawAndClear:
    """Tests for removing flags."""

    def test_withdraw_removes_only_own_flag(self):
        ledger = FlagLedger()
        comment = ledger.flag(make_comment("c"), UserId("a"), FlagReason.SPAM)
        comment = ledger.flag(comment, UserId("b"), FlagReason.SPAM)

        result = ledger.withdraw(comment, UserId("a"))

        assert [f.user_id for f in result.flags] == ["b"]

    def test_withdraw_without_flag_is_noop(self):
        ledger = FlagLedger()
        comment = make_comment("c")

        assert ledger.withdraw(comment, UserId("a")).flags == ()

    def test_clear_removes_everything(self):
        ledger = FlagLedger()
        comment = ledger.flag(make_comment("c"), UserId("a"), FlagReason.SPAM)

        assert ledger.clear(comment).flag_count == 0
