"""Domain layer DI providers."""

from dishka import Scope, provide

from paws.config import ModerationSettings
from paws.domain.repository import (
    CommentRepository,
    DiscussionContextRepository,
    RelationshipRepository,
)
from paws.domain.service import (
    CommentService,
    FlagLedger,
    HighlightSelector,
    ModerationStateMachine,
    PermissionEvaluator,
    ReactionLedger,
    TreeBuilder,
    VisibilityFilter,
)
from paws.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_permission_evaluator(self) -> PermissionEvaluator:
        """Provide permission predicates."""
        return PermissionEvaluator()

    @provide
    def get_tree_builder(self) -> TreeBuilder:
        """Provide tree builder."""
        return TreeBuilder()

    @provide
    def get_reaction_ledger(self) -> ReactionLedger:
        """Provide reaction ledger."""
        return ReactionLedger()

    @provide
    def get_flag_ledger(self) -> FlagLedger:
        """Provide flag ledger."""
        return FlagLedger()

    @provide
    def get_visibility_filter(
        self, relationship_repository: RelationshipRepository
    ) -> VisibilityFilter:
        """Provide visibility filter."""
        return VisibilityFilter(relationship_repository=relationship_repository)

    @provide
    def get_moderation_state_machine(
        self,
        relationship_repository: RelationshipRepository,
        permissions: PermissionEvaluator,
        flag_ledger: FlagLedger,
    ) -> ModerationStateMachine:
        """Provide moderation state machine."""
        return ModerationStateMachine(
            relationship_repository=relationship_repository,
            permissions=permissions,
            flag_ledger=flag_ledger,
        )

    @provide
    def get_highlight_selector(
        self, permissions: PermissionEvaluator
    ) -> HighlightSelector:
        """Provide highlight selector."""
        return HighlightSelector(permissions=permissions)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        context_repository: DiscussionContextRepository,
        relationship_repository: RelationshipRepository,
        visibility_filter: VisibilityFilter,
        tree_builder: TreeBuilder,
        permissions: PermissionEvaluator,
        reaction_ledger: ReactionLedger,
        flag_ledger: FlagLedger,
        moderation: ModerationStateMachine,
        highlight_selector: HighlightSelector,
        moderation_settings: ModerationSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            context_repository=context_repository,
            relationship_repository=relationship_repository,
            visibility_filter=visibility_filter,
            tree_builder=tree_builder,
            permissions=permissions,
            reaction_ledger=reaction_ledger,
            flag_ledger=flag_ledger,
            moderation=moderation,
            highlight_selector=highlight_selector,
            moderation_settings=moderation_settings,
        )
