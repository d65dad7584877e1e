"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input; no partial write has happened."""

    pass


class UnauthorizedError(DomainError):
    """Raised when an action requires an authenticated user and there is none."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictRetryableError(DomainError):
    """Raised by repositories when a concurrent writer changed a vote pair.

    The vote ledger resolves this by re-reading; callers never see it.
    """

    pass
