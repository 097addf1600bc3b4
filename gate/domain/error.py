"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class AuthenticationError(DomainError):
    """Raised when the identity provider cannot resolve a presented token."""

    def __init__(self) -> None:
        super().__init__("Authentication failed")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
