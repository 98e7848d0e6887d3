"""
Werkzeug Credential Hasher
==========================

CredentialHasher backed by werkzeug.security.
"""
from werkzeug.security import check_password_hash, generate_password_hash

from hbnb.domain.services.credential_hasher import CredentialHasher


class WerkzeugCredentialHasher(CredentialHasher):
    """Salted password hashes in werkzeug's "method$salt$hash" format."""

    def __init__(self, method: str = "scrypt"):
        self._method = method

    def hash(self, plaintext: str) -> str:
        return generate_password_hash(plaintext, method=self._method)

    def verify(self, plaintext: str, hashed: str) -> bool:
        if not hashed:
            return False
        return check_password_hash(hashed, plaintext)
