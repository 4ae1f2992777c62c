"""Mock persistence providers for testing."""

from dishka import Scope, provide

from paws.domain.repository import (
    CommentRepository,
    DiscussionContextRepository,
    RelationshipRepository,
)
from paws.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDiscussionContextRepository,
    InMemoryRelationshipRepository,
)
from paws.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.REQUEST)
    def get_context_repository(self) -> DiscussionContextRepository:
        """Provide in-memory discussion context repository."""
        return InMemoryDiscussionContextRepository()

    @provide(scope=Scope.REQUEST)
    def get_relationship_repository(self) -> RelationshipRepository:
        """Provide in-memory relationship repository."""
        return InMemoryRelationshipRepository()
