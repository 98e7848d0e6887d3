from .credential_hasher import CredentialHasher

__all__ = ["CredentialHasher"]
