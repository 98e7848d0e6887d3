import logging
from typing import TYPE_CHECKING

from ...core.config import Settings
from ...infrastructure.db.memory_database import InMemoryDatabase
from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)

MEMORY_BACKEND = "memory"
MONGO_BACKEND = "mongo"


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the storage handle for the configured backend.
        The handle is built here and injected into repositories; a
        "mongo_client" registered beforehand (e.g. mongomock in tests) is
        reused instead of opening a new connection.
        """
        settings: Settings = container.get(Settings)
        backend = settings.storage_backend

        if backend == MEMORY_BACKEND:
            container.register_singleton("database", InMemoryDatabase())
        elif backend == MONGO_BACKEND:
            client = container.get("mongo_client") if container.has("mongo_client") else None
            container.register_singleton("database", MongoConnection(settings, client=client))
        else:
            raise ValueError(f"Unknown STORAGE_BACKEND '{backend}' (expected 'memory' or 'mongo')")

        logger.info(f"Storage backend: {backend}")
