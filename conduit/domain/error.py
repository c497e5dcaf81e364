"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error on a single field."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field} {message}")


class InvalidCredentialsError(DomainError):
    """Raised when login fails.

    Deliberately does not say whether the email or the password was wrong.
    """

    def __init__(self) -> None:
        super().__init__("email or password is invalid")


class MissingTokenError(DomainError):
    """Raised when an authenticated operation receives no token."""

    def __init__(self) -> None:
        super().__init__("Authentication token required")


class InvalidTokenError(DomainError):
    """Raised when a supplied token is malformed, forged or expired."""

    pass


class DuplicateUniqueError(DomainError):
    """Raised when a unique field (username, email, slug) is already taken."""

    def __init__(self, field: str, message: str = "is already taken."):
        self.field = field
        self.message = message
        super().__init__(f"{field} {message}")


class ForbiddenError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not allowed to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
