# Standard library imports
from typing import Any, Optional

# Local application imports
from ..application.services.hbnb_facade import HBnBFacade
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    FacadeProvider,
    RepositoryProvider,
    SecurityProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Storage handle (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on storage
    3. Credential hasher (SecurityProvider)
    4. Guard and facade (FacadeProvider) - depend on all of the above

    Each container owns its own storage handle; build one per application
    (or per test) instead of sharing a module-level instance.
    """

    def __init__(self, settings: Optional[Settings] = None, mongo_client: Optional[Any] = None) -> None:
        super().__init__()
        self.register_singleton(Settings, settings or get_settings())
        if mongo_client is not None:
            self.register_singleton("mongo_client", mongo_client)
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: storage → repositories → security → facade
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        SecurityProvider.register(self)
        FacadeProvider.register(self)


def build_facade(settings: Optional[Settings] = None, mongo_client: Optional[Any] = None) -> HBnBFacade:
    """
    Build a fully wired facade.

    Args:
        settings: Settings to use (environment defaults if omitted)
        mongo_client: Pre-built MongoClient for the "mongo" backend

    Returns:
        HBnBFacade instance
    """
    return DIContainer(settings, mongo_client).get(HBnBFacade)
