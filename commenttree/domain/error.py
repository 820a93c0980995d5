"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised before storage is touched; never retried.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ParentNotFoundError(DomainError):
    """Raised when a new comment names a parent that does not exist."""

    def __init__(self, parent_id: int):
        self.parent_id = parent_id
        super().__init__(f"Parent comment not found: {parent_id}")


class TransientStorageError(DomainError):
    """Raised when storage keeps failing after all retry attempts."""

    def __init__(self, operation: str, attempts: int):
        self.operation = operation
        self.attempts = attempts
        super().__init__(
            f"Storage operation {operation} failed after {attempts} attempts"
        )
