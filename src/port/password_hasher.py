from typing import Protocol


class PasswordHasher(Protocol):
    """Protocol for a slow, salted, one-way password hash."""
    def hash(self, plaintext: str) -> str:
        """Return a digest for plaintext. Raise HashingError if the primitive fails."""
        ...

    def verify(self, digest: str, plaintext: str) -> bool:
        """Return True iff plaintext matches digest. Never raises on mismatch."""
        ...
