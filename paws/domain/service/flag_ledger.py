"""Flag ledger."""

from datetime import datetime

from paws.domain.model import Comment, CommentFlag
from paws.domain.value import FlagReason, UserId

from .base import Service


class FlagLedger(Service):
    """Tracks at most one flag per user per comment.

    A flag is the user's current standing report, so flagging again replaces
    the earlier report wholesale. Flags are independent of moderation status
    and only disappear through ``withdraw`` or an explicit moderation action.
    """

    def flag(
        self,
        comment: Comment,
        user_id: UserId,
        reason: FlagReason,
        message: str | None = None,
        now: datetime | None = None,
    ) -> Comment:
        """Record or replace a user's flag.

        The replacement keeps the position of the user's earlier flag in the
        list; new flaggers are appended.

        Args:
            comment: Comment being flagged
            user_id: Flagging user
            reason: Flag reason
            message: Optional free text
            now: Flag time (defaults to the current time)

        Returns:
            Comment with updated flags
        """
        new_flag = CommentFlag(
            user_id=user_id,
            reason=reason,
            message=message,
            flagged_at=now or datetime.now(),
        )

        flags = list(comment.flags)
        index = next(
            (i for i, flag in enumerate(flags) if flag.user_id == user_id), None
        )
        if index is None:
            flags.append(new_flag)
        else:
            flags[index] = new_flag

        return comment.model_copy(update={"flags": tuple(flags)})

    def withdraw(self, comment: Comment, user_id: UserId) -> Comment:
        """Remove the user's own flag (no-op when there is none)."""
        flags = tuple(flag for flag in comment.flags if flag.user_id != user_id)
        return comment.model_copy(update={"flags": flags})

    def clear(self, comment: Comment) -> Comment:
        """Remove every flag."""
        return comment.model_copy(update={"flags": ()})

    def flag_of(self, comment: Comment, user_id: UserId | None) -> CommentFlag | None:
        """Return the user's current flag, if any."""
        if user_id is None:
            return None
        return next((flag for flag in comment.flags if flag.user_id == user_id), None)
