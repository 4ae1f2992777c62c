"""Unit tests for HighlightSelector."""

import pytest

from paws.domain.error import NotAuthorizedError, NotFoundError
from paws.domain.model import DiscussionContext
from paws.domain.service import HighlightSelector, PermissionEvaluator, TreeBuilder
from paws.domain.value import CommentId, HighlightKind, UserId, UserRole
from tests.conftest import make_actor, make_comment, make_ref

PINNED = HighlightKind.PINNED
BEST = HighlightKind.BEST_ANSWER


@pytest.fixture
def selector():
    return HighlightSelector(permissions=PermissionEvaluator())


@pytest.fixture
def context():
    return DiscussionContext(ref=make_ref(), owner_id=UserId("owner"))


@pytest.fixture
def comments():
    return [
        make_comment("a", minutes=0),
        make_comment("b", minutes=1),
        make_comment("b1", parent_id="b", minutes=2),
    ]


class TestToggle:
    """Tests for setting and clearing slots."""

    def test_owner_pins_comment(self, selector, context, comments):
        owner = make_actor("owner")

        result = selector.toggle(context, owner, PINNED, CommentId("a"), comments)

        assert result.pinned_comment_id == "a"
        assert result.best_answer_comment_id is None

    def test_selecting_current_value_clears_slot(self, selector, context, comments):
        owner = make_actor("owner")
        pinned = selector.toggle(context, owner, PINNED, CommentId("a"), comments)

        result = selector.toggle(pinned, owner, PINNED, CommentId("a"), comments)

        assert result.pinned_comment_id is None

    def test_selecting_another_comment_replaces_slot(self, selector, context, comments):
        owner = make_actor("owner")
        pinned = selector.toggle(context, owner, PINNED, CommentId("a"), comments)

        result = selector.toggle(pinned, owner, PINNED, CommentId("b1"), comments)

        assert result.pinned_comment_id == "b1"

    def test_slots_are_independent(self, selector, context, comments):
        """The same comment can be pinned and best answer at once."""
        owner = make_actor("owner")
        result = selector.toggle(context, owner, PINNED, CommentId("b"), comments)
        result = selector.toggle(result, owner, BEST, CommentId("b"), comments)

        assert result.pinned_comment_id == "b"
        assert result.best_answer_comment_id == "b"

    def test_non_owner_is_refused(self, selector, context, comments):
        moderator = make_actor("mod", role=UserRole.MODERATOR)

        with pytest.raises(NotAuthorizedError):
            selector.toggle(context, moderator, PINNED, CommentId("a"), comments)

    def test_unknown_comment_is_refused(self, selector, context, comments):
        with pytest.raises(NotFoundError):
            selector.toggle(
                context, make_actor("owner"), BEST, CommentId("zz"), comments
            )


class TestResolve:
    """Tests for looking highlights up in a built thread."""

    def test_resolves_to_nodes_of_the_thread(self, selector, context, comments):
        context = context.with_highlight(PINNED, CommentId("b1"))
        nodes = TreeBuilder().build(comments)

        highlights = selector.resolve(context, nodes)

        assert highlights.pinned is nodes[0].children[0]
        assert highlights.pinned.depth == 1
        assert highlights.best_answer is None

    def test_dangling_reference_resolves_to_none(self, selector, context, comments):
        context = context.with_highlight(BEST, CommentId("deleted"))

        highlights = selector.resolve(context, TreeBuilder().build(comments))

        assert highlights.best_answer is None
