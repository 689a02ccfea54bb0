"""Account store: registration, password hashing and login for forum users.

Pure business logic over two injected collaborators: a UserRepository for
persistence and a PasswordHasher for the credential digest. Raises domain
errors; callers at the HTTP/forum boundary map them to responses.

Every operation that takes Credentials clears the plaintext before it
returns, whether it succeeds or raises.
"""

import logging

from domain.model.errors import (
    DomainError,
    EmptyPasswordError,
    InvalidCredentialsError,
    NotFoundError,
)
from domain.model.user import Credentials, User
from port.password_hasher import PasswordHasher
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

_TIMING_DUMMY_PASSWORD = 'not-a-real-password'


class AccountStore:
    def __init__(self, repo: UserRepository, hasher: PasswordHasher):
        self.repo = repo
        self.hasher = hasher
        # Verified against when the handle lookup fails.
        self._dummy_digest = hasher.hash(_TIMING_DUMMY_PASSWORD)

    def set_password(self, user: User, credentials: Credentials) -> None:
        """Hash credentials.password onto user.password_hash.

        Raises:
            EmptyPasswordError: no password supplied
            HashingError: the hashing primitive failed
        """
        try:
            if len(credentials.password) < 1:
                raise EmptyPasswordError()
            digest = self.hasher.hash(credentials.password)
        finally:
            credentials.clear()
        user.password_hash = digest

    def register(self, credentials: Credentials) -> User:
        """Register a new user.

        Hashing happens before any write, so a bad password never touches the store.

        Raises:
            EmptyPasswordError: no password supplied
            HashingError: the hashing primitive failed
            ConflictError: handle or email already taken
            StoreError: any other persistence failure
        """
        candidate = User(handle=credentials.handle, email=credentials.email)
        self.set_password(candidate, credentials)

        user = self.repo.create(
            handle=candidate.handle,
            email=candidate.email,
            password_hash=candidate.password_hash,
        )
        logger.info("User registered", extra={"userId": user.id, "handle": user.handle})
        return user

    def login(self, credentials: Credentials) -> User:
        """Authenticate by handle and password and return the stored user.

        An unknown handle, a lookup failure and a wrong password all raise the
        same InvalidCredentialsError (carrying a guest User), so callers cannot
        tell which one happened.
        """
        handle = credentials.handle
        try:
            try:
                user = self.find_by_handle(handle)
                digest = user.password_hash
            except DomainError:
                user = None
                digest = self._dummy_digest
            verified = self.hasher.verify(digest, credentials.password)
        finally:
            credentials.clear()

        # Raised outside any handler so the exception carries no context from the lookup.
        if user is None or not verified:
            logger.warning("Login failed", extra={"handle": handle})
            raise InvalidCredentialsError(User.guest())

        logger.info("User logged in", extra={"userId": user.id, "handle": handle})
        return user

    def find_by_handle(self, handle: str) -> User:
        """Raises NotFoundError if no row matches, StoreError on store failure."""
        user = self.repo.get_by_handle(handle)
        if user is None:
            raise NotFoundError(f"No user with handle {handle!r}")
        return user

    def find_by_id(self, user_id: int) -> User:
        """Raises NotFoundError if no row matches, StoreError on store failure."""
        user = self.repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"No user with id {user_id}")
        return user

