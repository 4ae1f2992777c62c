"""Unit tests for the moderation use cases."""

import pytest

from paws.application.usecase.moderation import (
    ApproveCommentRequest,
    ApproveCommentUseCase,
    GetModerationQueueRequest,
    GetModerationQueueUseCase,
    ModerateCommentRequest,
    ModerateCommentUseCase,
)
from paws.domain.error import InvalidTransitionError, NotAuthorizedError
from paws.domain.repository import RelationshipRepository
from paws.domain.service import CommentService
from paws.domain.value import CommentStatus, FlagReason, UserRole
from tests.conftest import make_actor, make_ref
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

REF = make_ref()
OWNER = make_actor("owner")
ALICE = make_actor("alice")
BOB = make_actor("bob")
CAROL = make_actor("carol")
MOD = make_actor("mod", role=UserRole.MODERATOR)


@pytest.fixture
def service(unit_env) -> CommentService:
    comment_service = unit_env.get(CommentService)
    comment_service.open_context(REF, OWNER.id)
    return comment_service


def queue_request(actor) -> GetModerationQueueRequest:
    return GetModerationQueueRequest(
        context_type=REF.context_type, context_id=REF.context_id, actor=actor
    )


class TestModerateCommentUseCase:
    """Tests for ModerateCommentUseCase."""

    def test_hide_records_audit_fields(self, unit_env, service):
        # Arrange
        comment = service.create_comment(REF, ALICE, "Buy cheap kibble now")
        service.flag_comment(comment.id, BOB, FlagReason.SPAM)
        use_case = unit_env.get(ModerateCommentUseCase)

        # Act
        response = use_case.execute(
            ModerateCommentRequest(
                comment_id=comment.id,
                actor=MOD,
                status=CommentStatus.HIDDEN,
                note="Advertising",
                clear_flags=True,
            )
        )

        # Assert
        assert response.comment.status == CommentStatus.HIDDEN
        assert response.comment.flag_count == 0
        assert response.moderator_id == "mod"
        assert response.moderation_note == "Advertising"

    def test_regular_user_cannot_moderate(self, unit_env, service):
        comment = service.create_comment(REF, ALICE, "Hello")
        use_case = unit_env.get(ModerateCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            use_case.execute(
                ModerateCommentRequest(
                    comment_id=comment.id, actor=BOB, status=CommentStatus.HIDDEN
                )
            )

    def test_published_cannot_go_back_to_pending(self, unit_env, service):
        comment = service.create_comment(REF, ALICE, "Hello")
        use_case = unit_env.get(ModerateCommentUseCase)

        with pytest.raises(InvalidTransitionError):
            use_case.execute(
                ModerateCommentRequest(
                    comment_id=comment.id, actor=OWNER, status=CommentStatus.PENDING
                )
            )


class TestApproveCommentUseCase:
    """Tests for ApproveCommentUseCase."""

    def test_owner_approves_pending_comment(self, unit_env, service):
        unit_env.get(RelationshipRepository).restrict(OWNER.id, ALICE.id)
        comment = service.create_comment(REF, ALICE, "Please let me in")
        use_case = unit_env.get(ApproveCommentUseCase)

        response = use_case.execute(
            ApproveCommentRequest(comment_id=comment.id, actor=OWNER)
        )

        assert response.comment.status == CommentStatus.PUBLISHED

    def test_published_comment_cannot_be_approved(self, unit_env, service):
        comment = service.create_comment(REF, ALICE, "Already live")
        use_case = unit_env.get(ApproveCommentUseCase)

        with pytest.raises(InvalidTransitionError):
            use_case.execute(ApproveCommentRequest(comment_id=comment.id, actor=OWNER))


class TestGetModerationQueueUseCase:
    """Tests for GetModerationQueueUseCase."""

    def test_queue_lists_pending_and_flagged_most_flagged_first(
        self, unit_env, service
    ):
        # Arrange
        unit_env.get(RelationshipRepository).restrict(OWNER.id, CAROL.id)
        service.create_comment(REF, ALICE, "Clean comment")
        once = service.create_comment(REF, ALICE, "Flagged once")
        twice = service.create_comment(REF, BOB, "Flagged twice")
        pending = service.create_comment(REF, CAROL, "Held for review")
        service.flag_comment(once.id, BOB, FlagReason.OFF_TOPIC)
        service.flag_comment(twice.id, ALICE, FlagReason.HARASSMENT, "Mean")
        service.flag_comment(twice.id, CAROL, FlagReason.HARASSMENT)
        use_case = unit_env.get(GetModerationQueueUseCase)

        # Act
        response = use_case.execute(queue_request(OWNER))

        # Assert
        assert response.total == 3
        assert [item.comment.comment_id for item in response.items] == [
            twice.id,
            once.id,
            pending.id,
        ]
        first_flag = response.items[0].flags[0]
        assert first_flag.user_id == "alice"
        assert first_flag.reason == FlagReason.HARASSMENT
        assert first_flag.message == "Mean"

    def test_queue_refused_for_regular_users(self, unit_env, service):
        use_case = unit_env.get(GetModerationQueueUseCase)

        with pytest.raises(NotAuthorizedError):
            use_case.execute(queue_request(ALICE))
