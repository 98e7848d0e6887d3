"""
Credential Hasher Interface
===========================

Contract of the external collaborator that turns plaintext passwords into
opaque hashes. The core never stores or compares plaintext itself.
"""
from abc import ABC, abstractmethod


class CredentialHasher(ABC):
    """Abstract password hashing collaborator."""

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """Return an opaque hash of the plaintext password."""
        pass

    @abstractmethod
    def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a plaintext password against a stored hash."""
        pass
