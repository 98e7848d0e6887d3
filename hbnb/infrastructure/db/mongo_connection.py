"""
MongoDB Connection
==================

MongoDB client wrapper handed to the Mongo repositories. It is built
explicitly by the DI container (or a test) and injected; nothing in the
core reaches for a process-wide client.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from hbnb.core.config import Settings

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    Owns a MongoClient and gives access to collections.

    The client is created lazily from settings.mongo_uri unless one is
    passed in (tests pass a mongomock client).
    """

    def __init__(self, settings: Settings, client: Optional[MongoClient] = None):
        self._settings = settings
        self._client = client
        self._database: Optional[Database] = None

    def _initialize_client(self) -> None:
        """Initialize MongoDB client connection."""
        if self._client is None:
            if not self._settings.mongo_uri:
                raise RuntimeError("MONGO_URI not set. Please configure it in your .env file.")
            self._client = MongoClient(self._settings.mongo_uri)
        self._database = self._client[self._settings.mongo_database_name]
        logger.info(f"Connected to MongoDB: {self._settings.mongo_database_name}")

    def get_database(self) -> Database:
        """Get MongoDB database instance."""
        if self._database is None:
            self._initialize_client()
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        return self.get_database()[collection_name]

    def close(self) -> None:
        """Close MongoDB connection."""
        if self._client is not None:
            self._client.close()
            self._client = None
            self._database = None
