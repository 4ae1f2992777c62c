"""Discussion context repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from paws.domain.model.context import DiscussionContext
from paws.domain.value import ContextRef


class DiscussionContextRepository(ABC):
    """Repository for DiscussionContext entity."""

    @abstractmethod
    def find_by_ref(self, ref: ContextRef) -> Optional[DiscussionContext]:
        """Find a discussion context.

        Args:
            ref: Context type and id

        Returns:
            The context if registered, None otherwise
        """
        pass

    @abstractmethod
    def save(self, context: DiscussionContext) -> DiscussionContext:
        """Save a discussion context (create or update).

        Args:
            context: The context to save

        Returns:
            The saved context
        """
        pass
