"""Domain-level exceptions.

Adapters translate driver errors into these at their boundary, and
AccountStore raises them to callers. Generic messages are fixed per class
so that nothing about the schema, the driver or which unique field
conflicted can reach an end user.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class EmptyPasswordError(ValidationError):
    """No password was provided."""

    def __init__(self):
        super().__init__("No password was provided")


class HashingError(DomainError):
    """The password hashing primitive failed."""


class ConflictError(DuplicateError):
    """Handle or email is already taken."""

    MESSAGE = "That handle or email address is already in use. Please choose differently."

    def __init__(self):
        super().__init__(self.MESSAGE)


class InvalidCredentialsError(DomainError):
    """Login failed, either because the handle is unknown or the password is wrong."""

    MESSAGE = "The handle or password was invalid"

    def __init__(self, user=None):
        # Guest placeholder the caller may treat as "logged out".
        self.user = user
        super().__init__(self.MESSAGE)


class StoreError(DomainError):
    """Persistence layer failure (connection loss, bad query, ...)."""

    MESSAGE = "We had a database problem"

    def __init__(self):
        super().__init__(self.MESSAGE)
