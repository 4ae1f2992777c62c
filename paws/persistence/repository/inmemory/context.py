"""In-memory discussion context repository for testing."""

from typing import Optional

from paws.domain.model.context import DiscussionContext
from paws.domain.repository.context import DiscussionContextRepository
from paws.domain.value import ContextRef


class InMemoryDiscussionContextRepository(DiscussionContextRepository):
    """In-memory implementation of DiscussionContextRepository for testing."""

    def __init__(self) -> None:
        self._contexts: dict[ContextRef, DiscussionContext] = {}

    def find_by_ref(self, ref: ContextRef) -> Optional[DiscussionContext]:
        """Find a context by reference."""
        return self._contexts.get(ref)

    def save(self, context: DiscussionContext) -> DiscussionContext:
        """Save or update a context."""
        self._contexts[context.ref] = context
        return context
