from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.services.credential_hasher import CredentialHasher
from ...infrastructure.security.werkzeug_hasher import WerkzeugCredentialHasher

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Credential hashing provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings: Settings = container.get(Settings)
        container.register_singleton(
            CredentialHasher,
            WerkzeugCredentialHasher(method=settings.password_hash_method),
        )
