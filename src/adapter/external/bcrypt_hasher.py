"""bcrypt adapter.

Implements PasswordHasher with the bcrypt construction: per-hash random
salt, adaptive cost, constant-time comparison in checkpw.
"""

import logging
import os

import bcrypt

from domain.model.errors import HashingError

logger = logging.getLogger(__name__)

# 2^12 = 4096 iterations
DEFAULT_BCRYPT_ROUNDS = 12
MIN_BCRYPT_ROUNDS = 4
MAX_BCRYPT_ROUNDS = 31


def rounds_from_env() -> int:
    """Read BCRYPT_ROUNDS, falling back to the default and clamping to bcrypt's range."""
    raw = os.getenv('BCRYPT_ROUNDS', '')
    try:
        rounds = int(raw) if raw else DEFAULT_BCRYPT_ROUNDS
    except ValueError:
        logger.warning("Ignoring invalid BCRYPT_ROUNDS", extra={"value": raw})
        rounds = DEFAULT_BCRYPT_ROUNDS
    return max(MIN_BCRYPT_ROUNDS, min(MAX_BCRYPT_ROUNDS, rounds))


class BcryptPasswordHasher:
    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            return bcrypt.hashpw(plaintext.encode('utf-8'), salt).decode('utf-8')
        except (ValueError, TypeError) as e:
            # bcrypt rejects e.g. passwords longer than 72 bytes
            logger.error("Password hashing failed", extra={"error": type(e).__name__})
            raise HashingError("Password could not be hashed") from e

    def verify(self, digest: str, plaintext: str) -> bool:
        if not digest:
            return False
        try:
            return bcrypt.checkpw(plaintext.encode('utf-8'), digest.encode('utf-8'))
        except (ValueError, TypeError):
            logger.warning("Stored password digest is malformed")
            return False
