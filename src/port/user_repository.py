from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    def create(self, handle: str, email: str, password_hash: str) -> User:
        """Insert a new user in one transaction and return it with its generated id and created_at.

        Raises ConflictError if handle or email is taken, StoreError on any other failure.
        Nothing is written when either is raised.
        """
        ...

    def get_by_handle(self, handle: str) -> User | None:
        """Find a user by handle. Return None if not found, raise StoreError on failure."""
        ...

    def get_by_id(self, user_id: int) -> User | None:
        """Find a user by ID. Return None if not found, raise StoreError on failure."""
        ...
