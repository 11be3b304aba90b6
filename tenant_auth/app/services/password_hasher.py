"""
Password Hasher

One-way salted hashing of credentials with bcrypt.
"""

from abc import ABC, abstractmethod

import bcrypt

from tenant_auth.config import ApplicationConfig


class PasswordHasher(ABC):
    """Password hashing contract"""

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        pass

    @abstractmethod
    def verify(self, plaintext: str, digest: str) -> bool:
        pass

    def dummy_verify(self, plaintext: str) -> None:
        """Spend one verification so unknown users cost the same as known ones"""
        self.verify(plaintext, self.hash("dummy_password"))


class BcryptPasswordHasher(PasswordHasher):
    """
    bcrypt-backed hasher.

    Cost factor 12 keeps a verification around 100-250ms on commodity
    hardware. Hashing errors propagate; verification never raises.
    """

    def __init__(self, rounds: int = None):
        self.rounds = rounds or ApplicationConfig.BCRYPT_ROUNDS
        self._dummy_digest = None

    def hash(self, plaintext: str) -> str:
        digest = bcrypt.hashpw(plaintext.encode("utf-8"), bcrypt.gensalt(self.rounds))
        return digest.decode("utf-8")

    def verify(self, plaintext: str, digest: str) -> bool:
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))
        except (ValueError, AttributeError):
            # Malformed or missing digest
            return False

    def dummy_verify(self, plaintext: str) -> None:
        if self._dummy_digest is None:
            self._dummy_digest = self.hash("dummy_password")
        self.verify(plaintext, self._dummy_digest)
