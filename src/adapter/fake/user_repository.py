"""In-memory implementation of UserRepository for testing."""

from dataclasses import replace
from datetime import datetime, timezone
from domain.model.errors import ConflictError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[int, User] = {}
        self.create_calls = 0
        self._next_id = 1

    # ── write operations ─────────────────────────────────────

    def create(self, handle: str, email: str, password_hash: str) -> User:
        self.create_calls += 1
        if any(u.handle == handle or u.email == email for u in self.store.values()):
            raise ConflictError()

        user = User(
            id=self._next_id,
            handle=handle,
            email=email,
            password_hash=password_hash,
            created_at=datetime.now(timezone.utc),
        )
        self._next_id += 1
        self.store[user.id] = user
        # Copies only, so callers cannot mutate the stored row.
        return replace(user)

    # ── read operations ──────────────────────────────────────

    def get_by_handle(self, handle: str) -> User | None:
        for user in self.store.values():
            if user.handle == handle:
                return replace(user)
        return None

    def get_by_id(self, user_id: int) -> User | None:
        user = self.store.get(user_id)
        return replace(user) if user else None
