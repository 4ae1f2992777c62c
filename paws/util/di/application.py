"""Application layer DI providers."""

from dishka import Scope, provide

from paws.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetThreadUseCase,
    UpdateCommentUseCase,
)
from paws.application.usecase.context import OpenContextUseCase
from paws.application.usecase.flag import FlagCommentUseCase, WithdrawFlagUseCase
from paws.application.usecase.highlight import ToggleHighlightUseCase
from paws.application.usecase.moderation import (
    ApproveCommentUseCase,
    GetModerationQueueUseCase,
    ModerateCommentUseCase,
)
from paws.application.usecase.reaction import ToggleReactionUseCase
from paws.domain.service import (
    CommentService,
    FlagLedger,
    PermissionEvaluator,
    ReactionLedger,
)
from paws.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Context use cases
    @provide(scope=Scope.REQUEST)
    def get_open_context_use_case(
        self, comment_service: CommentService
    ) -> OpenContextUseCase:
        """Provide open context use case."""
        return OpenContextUseCase(comment_service=comment_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self,
        comment_service: CommentService,
        permissions: PermissionEvaluator,
        reaction_ledger: ReactionLedger,
        flag_ledger: FlagLedger,
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            comment_service=comment_service,
            permissions=permissions,
            reaction_ledger=reaction_ledger,
            flag_ledger=flag_ledger,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Engagement use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_reaction_use_case(
        self, comment_service: CommentService, reaction_ledger: ReactionLedger
    ) -> ToggleReactionUseCase:
        """Provide toggle reaction use case."""
        return ToggleReactionUseCase(
            comment_service=comment_service, reaction_ledger=reaction_ledger
        )

    @provide(scope=Scope.REQUEST)
    def get_flag_comment_use_case(
        self, comment_service: CommentService
    ) -> FlagCommentUseCase:
        """Provide flag comment use case."""
        return FlagCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_withdraw_flag_use_case(
        self, comment_service: CommentService
    ) -> WithdrawFlagUseCase:
        """Provide withdraw flag use case."""
        return WithdrawFlagUseCase(comment_service=comment_service)

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_moderate_comment_use_case(
        self, comment_service: CommentService
    ) -> ModerateCommentUseCase:
        """Provide moderate comment use case."""
        return ModerateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_approve_comment_use_case(
        self, comment_service: CommentService
    ) -> ApproveCommentUseCase:
        """Provide approve comment use case."""
        return ApproveCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_moderation_queue_use_case(
        self, comment_service: CommentService
    ) -> GetModerationQueueUseCase:
        """Provide moderation queue use case."""
        return GetModerationQueueUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_highlight_use_case(
        self, comment_service: CommentService
    ) -> ToggleHighlightUseCase:
        """Provide toggle highlight use case."""
        return ToggleHighlightUseCase(comment_service=comment_service)
