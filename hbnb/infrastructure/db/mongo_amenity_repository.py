"""
MongoDB Amenity Repository
==========================

Concrete implementation of AmenityRepository using MongoDB.
"""
from typing import Optional

from hbnb.domain.constants.amenity_fields import AmenityFields
from hbnb.domain.models.amenity import Amenity
from hbnb.domain.repositories.amenity_repository import AmenityRepository
from hbnb.infrastructure.db.mongo_connection import MongoConnection
from hbnb.infrastructure.db.mongo_repository import MongoRepository, translate_errors
from hbnb.utils.datetime_utils import ensure_aware


class MongoAmenityRepository(MongoRepository[Amenity], AmenityRepository):
    """MongoDB implementation of AmenityRepository."""

    ENTITY_NAME = "amenity"
    UPDATABLE_FIELDS = frozenset({AmenityFields.NAME, AmenityFields.DESCRIPTION, AmenityFields.UPDATED_AT})

    def __init__(self, connection: MongoConnection, collection_name: str = "amenities"):
        super().__init__(connection, collection_name)
        with translate_errors("create_index"):
            self._collection.create_index(AmenityFields.NAME_KEY, unique=True)

    def _to_entity(self, doc: dict) -> Amenity:
        """Convert MongoDB document to Amenity entity."""
        return Amenity(
            id=doc[AmenityFields.ID],
            name=doc[AmenityFields.NAME],
            description=doc.get(AmenityFields.DESCRIPTION, ""),
            created_at=ensure_aware(doc[AmenityFields.CREATED_AT]),
            updated_at=ensure_aware(doc[AmenityFields.UPDATED_AT]),
            version=doc.get(AmenityFields.VERSION, 1),
        )

    def _to_document(self, amenity: Amenity) -> dict:
        """Convert Amenity entity to MongoDB document."""
        return {
            AmenityFields.ID: amenity.id,
            AmenityFields.NAME: amenity.name,
            AmenityFields.NAME_KEY: amenity.name.lower(),
            AmenityFields.DESCRIPTION: amenity.description,
            AmenityFields.CREATED_AT: amenity.created_at,
            AmenityFields.UPDATED_AT: amenity.updated_at,
            AmenityFields.VERSION: amenity.version,
        }

    def _encode_changes(self, partial):
        changes = dict(partial)
        if AmenityFields.NAME in changes:
            changes[AmenityFields.NAME_KEY] = changes[AmenityFields.NAME].lower()
        return changes

    def find_by_name(self, name: str) -> Optional[Amenity]:
        """Find an amenity by name, ignoring case."""
        return self._find_one({AmenityFields.NAME_KEY: name.strip().lower()})
