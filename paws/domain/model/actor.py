"""Acting user.

The engine never reads ambient session state; the host application builds
an Actor from its identity provider and passes it into every call.
"""

from pydantic import Field

from paws.domain.model.common import DomainModel
from paws.domain.value import UserId, UserRole


class Actor(DomainModel):
    """The user performing an operation or viewing a thread."""

    id: UserId
    role: UserRole = UserRole.USER
    blocked_ids: frozenset[UserId] = Field(default_factory=frozenset)

    @property
    def is_moderator(self) -> bool:
        """Whether the actor holds a site-wide moderation role."""
        return self.role in (UserRole.MODERATOR, UserRole.ADMIN)
