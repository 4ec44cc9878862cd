"""
Password hashing with bcrypt.

Only salted hashes are ever stored; plaintext passwords never leave
the request that carried them.
"""

import bcrypt

DEFAULT_ROUNDS = 12

# bcrypt only consumes the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


class PasswordHasher:
    """Hash and verify passwords with bcrypt."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._rounds = rounds
        self._dummy_hash: str | None = None

    def hash(self, password: str) -> str:
        """Hash a password with a fresh salt."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against its hash."""
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False

    def verify_dummy(self, password: str) -> None:
        """
        Spend the same work as a real verification and discard the result.

        Used when the account does not exist so login timing matches the
        wrong-password path.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self.hash("dummy-password-for-timing")
        self.verify(password, self._dummy_hash)
