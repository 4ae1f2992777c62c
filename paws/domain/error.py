"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when an actor attempts an action they are not allowed to take."""

    def __init__(self, action: str, resource_id: str, user_id: str | None):
        self.action = action
        self.resource_id = resource_id
        self.user_id = user_id
        who = f"User {user_id}" if user_id else "Anonymous user"
        super().__init__(f"{who} is not authorized to {action} {resource_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidTransitionError(BusinessRuleViolationError):
    """Raised when a moderation action asks for a forbidden status change."""

    def __init__(self, comment_id: str, from_status: str, to_status: str):
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(
            f"Comment {comment_id} cannot move from {from_status} to {to_status}"
        )


class InteractionBlockedError(BusinessRuleViolationError):
    """Raised when a blocking relationship forbids an interaction."""

    def __init__(self, user_id: str, other_user_id: str):
        self.user_id = user_id
        self.other_user_id = other_user_id
        super().__init__(
            f"User {user_id} cannot interact with content of {other_user_id} "
            "because of a blocking relationship"
        )
