"""Persistence infrastructure providers."""

from collections.abc import Iterator

from dishka import Scope, provide
import logfire
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from paws.config import Settings
from paws.domain.repository import (
    CommentRepository,
    DiscussionContextRepository,
    RelationshipRepository,
)
from paws.persistence.database import create_engine, create_session_factory
from paws.persistence.repository import (
    SqlCommentRepository,
    SqlDiscussionContextRepository,
    SqlRelationshipRepository,
)
from paws.util.di.base import ProviderBase
from paws.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using SQLAlchemy."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> Iterator[Engine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: Engine) -> sessionmaker[Session]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    def get_session(self, session_factory: sessionmaker[Session]) -> Iterator[Session]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        with session_factory() as session:
            try:
                yield session
                session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: Session) -> CommentRepository:
        """Provide Comment repository."""
        return SqlCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_context_repository(self, session: Session) -> DiscussionContextRepository:
        """Provide DiscussionContext repository."""
        return SqlDiscussionContextRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_relationship_repository(self, session: Session) -> RelationshipRepository:
        """Provide Relationship repository."""
        return SqlRelationshipRepository(session)
