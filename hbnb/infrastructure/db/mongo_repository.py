"""
MongoDB Base Repository
=======================

CRUD logic shared by the MongoDB repositories. Subclasses provide the
document <-> entity mapping and the entity-specific finders.
"""
import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, Mapping, Optional, TypeVar

from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from hbnb.domain.exceptions import ConcurrencyError, NotFoundError, PersistenceError
from hbnb.infrastructure.db.mongo_connection import MongoConnection
from hbnb.utils.datetime_utils import now

logger = logging.getLogger(__name__)

EntityType = TypeVar("EntityType")

ID_FIELD = "id"
VERSION_FIELD = "version"
MONGO_ID = "_id"


@contextmanager
def translate_errors(operation: str, entity_id: Optional[str] = None):
    """Re-raise driver failures as PersistenceError."""
    try:
        yield
    except PyMongoError as e:
        logger.error(f"MongoDB {operation} failed: {e}")
        raise PersistenceError(operation, str(e), entity_id) from e


class MongoRepository(ABC, Generic[EntityType]):
    """MongoDB implementation of the shared repository operations."""

    ENTITY_NAME = ""
    UPDATABLE_FIELDS: frozenset = frozenset()

    def __init__(self, connection: MongoConnection, collection_name: str):
        self._collection: Collection = connection.get_collection(collection_name)
        with translate_errors("create_index"):
            self._collection.create_index(ID_FIELD, unique=True)

    @abstractmethod
    def _to_entity(self, doc: dict) -> EntityType:
        """Convert a stored document to an entity."""
        pass

    @abstractmethod
    def _to_document(self, entity: EntityType) -> dict:
        """Convert an entity to a document for insertion."""
        pass

    def _encode_changes(self, partial: Mapping[str, Any]) -> Dict[str, Any]:
        """Convert a partial update to document fields."""
        return dict(partial)

    def _find_many(self, query: dict) -> List[EntityType]:
        with translate_errors("find"):
            docs = list(self._collection.find(query).sort(MONGO_ID, ASCENDING))
        return [self._to_entity(doc) for doc in docs]

    def _find_one(self, query: dict) -> Optional[EntityType]:
        with translate_errors("find_one"):
            doc = self._collection.find_one(query)
        return self._to_entity(doc) if doc else None

    def save(self, entity: EntityType) -> EntityType:
        """Insert a new document."""
        try:
            with translate_errors("save", entity.id):
                self._collection.insert_one(self._to_document(entity))
        except PersistenceError as e:
            if isinstance(e.__cause__, DuplicateKeyError):
                raise PersistenceError(
                    "save", f"{self.ENTITY_NAME} '{entity.id}' already exists", entity.id
                ) from e.__cause__
            raise
        return entity

    def find_by_id(self, entity_id: str) -> Optional[EntityType]:
        return self._find_one({ID_FIELD: entity_id})

    def update(
        self,
        entity_id: str,
        partial: Mapping[str, Any],
        expected_version: Optional[int] = None,
    ) -> EntityType:
        """Apply a partial update, optionally guarded by the stored version."""
        unknown = set(partial) - self.UPDATABLE_FIELDS
        if unknown:
            raise PersistenceError(
                "update", f"cannot set {', '.join(sorted(unknown))} on {self.ENTITY_NAME}", entity_id
            )

        changes = self._encode_changes(partial)
        changes.setdefault("updated_at", now())
        query: Dict[str, Any] = {ID_FIELD: entity_id}
        if expected_version is not None:
            query[VERSION_FIELD] = expected_version

        with translate_errors("update", entity_id):
            doc = self._collection.find_one_and_update(
                query,
                {"$set": changes, "$inc": {VERSION_FIELD: 1}},
                return_document=ReturnDocument.AFTER,
            )
            if doc is None:
                exists = self._collection.count_documents({ID_FIELD: entity_id}, limit=1) > 0
        if doc is None:
            if not exists:
                raise NotFoundError(self.ENTITY_NAME, entity_id)
            raise ConcurrencyError(
                self.ENTITY_NAME,
                entity_id,
                f"{self.ENTITY_NAME.capitalize()} '{entity_id}' is no longer at version {expected_version}",
            )
        return self._to_entity(doc)

    def delete(self, entity_id: str) -> None:
        with translate_errors("delete", entity_id):
            result = self._collection.delete_one({ID_FIELD: entity_id})
        if result.deleted_count == 0:
            raise NotFoundError(self.ENTITY_NAME, entity_id)

    def find_all(self) -> Iterator[EntityType]:
        """Stream documents in insertion order."""
        with translate_errors("find_all"):
            cursor = self._collection.find({}).sort(MONGO_ID, ASCENDING)
            for doc in cursor:
                yield self._to_entity(doc)
