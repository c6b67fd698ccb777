"""
Password hashing.

One-way bcrypt hashing with a fresh random salt per hash. Verification
recomputes the hash with the salt embedded in the stored value; nothing
is ever decrypted.
"""

from typing import Optional

import bcrypt

DEFAULT_ROUNDS = 10

# bcrypt ignores everything past the first 72 bytes of input
BCRYPT_MAX_BYTES = 72


def _encode(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """
    bcrypt hasher with a fixed cost factor.

    Both methods are CPU-bound and synchronous; async callers should run
    them in a worker thread.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds
        self._dummy_hash: Optional[bytes] = None

    def hash(self, plaintext: str) -> str:
        """
        Hash a password. Two calls with the same input give different results.

        Raises:
            ValueError: If the password is empty
        """
        if not plaintext:
            raise ValueError("Password must not be empty")
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(plaintext), salt).decode("ascii")

    def verify(self, plaintext: str, hash_value: str) -> bool:
        """
        Check a password against a stored hash.

        Returns False for an empty password or a malformed hash instead of
        raising.
        """
        if not plaintext or not hash_value:
            return False
        try:
            return bcrypt.checkpw(_encode(plaintext), hash_value.encode("utf-8"))
        except ValueError:
            return False

    def burn(self, plaintext: str) -> None:
        """
        Spend the same time as a real verification, against no user.

        Called when the username is unknown so both rejection paths cost
        one bcrypt check.
        """
        if self._dummy_hash is None:
            self._dummy_hash = bcrypt.hashpw(b"unused", bcrypt.gensalt(rounds=self.rounds))
        bcrypt.checkpw(_encode(plaintext or " "), self._dummy_hash)
