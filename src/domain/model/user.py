from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class User:
    """Domain model representing a forum account.

    A User with id 0 has no backing row and stands for a guest.
    """
    id: int = 0
    handle: str = ''
    email: str = ''
    password_hash: str | None = field(default=None, repr=False)
    created_at: datetime | None = None

    @classmethod
    def guest(cls) -> 'User':
        return cls()

    @property
    def is_guest(self) -> bool:
        return self.id == 0

    def get_id(self) -> int:
        return self.id


@dataclass
class Credentials:
    """Caller-supplied credential input for registration, login or a password change.

    The plaintext lives only for the duration of one service call;
    AccountStore clears it before returning, on success and on failure.
    """
    handle: str
    password: str = field(repr=False)
    email: str = ''

    def clear(self) -> None:
        self.password = ''
