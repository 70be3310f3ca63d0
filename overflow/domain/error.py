"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    status_code: int = 400


class ValidationError(DomainError):
    """Input failed shape or range validation.

    ``details`` maps field names to their error messages, so callers can
    highlight individual form fields.
    """

    def __init__(self, message: str, details: dict[str, list[str]] | None = None):
        self.details = details or {}
        super().__init__(message)


class AuthenticationError(DomainError):
    """Raised when an operation requires a caller identity and none was given."""

    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to edit content they don't own."""

    status_code = 403

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to edit {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class CreationError(DomainError):
    """Raised when the store does not return a newly inserted document."""

    status_code = 500

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"Failed to create {resource}")


class StoreError(DomainError):
    """Underlying transaction or connectivity failure."""

    status_code = 500
