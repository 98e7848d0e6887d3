"""
MongoDB Place Repository
========================

Concrete implementation of PlaceRepository using MongoDB.
"""
from typing import List

from hbnb.domain.constants.place_fields import PlaceFields
from hbnb.domain.models.place import EMPTY_AVERAGE_RATING, Place
from hbnb.domain.repositories.place_repository import PlaceRepository
from hbnb.infrastructure.db.mongo_connection import MongoConnection
from hbnb.infrastructure.db.mongo_repository import MongoRepository, translate_errors
from hbnb.utils.datetime_utils import ensure_aware


class MongoPlaceRepository(MongoRepository[Place], PlaceRepository):
    """MongoDB implementation of PlaceRepository."""

    ENTITY_NAME = "place"
    UPDATABLE_FIELDS = frozenset(
        {
            PlaceFields.TITLE,
            PlaceFields.DESCRIPTION,
            PlaceFields.PRICE,
            PlaceFields.LATITUDE,
            PlaceFields.LONGITUDE,
            PlaceFields.AMENITY_IDS,
            PlaceFields.AVERAGE_RATING,
            PlaceFields.UPDATED_AT,
        }
    )

    def __init__(self, connection: MongoConnection, collection_name: str = "places"):
        super().__init__(connection, collection_name)
        with translate_errors("create_index"):
            self._collection.create_index(PlaceFields.OWNER_ID)
            self._collection.create_index(PlaceFields.AMENITY_IDS)

    def _to_entity(self, doc: dict) -> Place:
        """Convert MongoDB document to Place entity."""
        return Place(
            id=doc[PlaceFields.ID],
            title=doc[PlaceFields.TITLE],
            description=doc.get(PlaceFields.DESCRIPTION, ""),
            price=doc[PlaceFields.PRICE],
            latitude=doc[PlaceFields.LATITUDE],
            longitude=doc[PlaceFields.LONGITUDE],
            owner_id=doc[PlaceFields.OWNER_ID],
            amenity_ids=tuple(doc.get(PlaceFields.AMENITY_IDS, [])),
            average_rating=doc.get(PlaceFields.AVERAGE_RATING, EMPTY_AVERAGE_RATING),
            created_at=ensure_aware(doc[PlaceFields.CREATED_AT]),
            updated_at=ensure_aware(doc[PlaceFields.UPDATED_AT]),
            version=doc.get(PlaceFields.VERSION, 1),
        )

    def _to_document(self, place: Place) -> dict:
        """Convert Place entity to MongoDB document."""
        return {
            PlaceFields.ID: place.id,
            PlaceFields.TITLE: place.title,
            PlaceFields.DESCRIPTION: place.description,
            PlaceFields.PRICE: place.price,
            PlaceFields.LATITUDE: place.latitude,
            PlaceFields.LONGITUDE: place.longitude,
            PlaceFields.OWNER_ID: place.owner_id,
            PlaceFields.AMENITY_IDS: list(place.amenity_ids),
            PlaceFields.AVERAGE_RATING: place.average_rating,
            PlaceFields.CREATED_AT: place.created_at,
            PlaceFields.UPDATED_AT: place.updated_at,
            PlaceFields.VERSION: place.version,
        }

    def _encode_changes(self, partial):
        changes = dict(partial)
        if PlaceFields.AMENITY_IDS in changes:
            changes[PlaceFields.AMENITY_IDS] = list(changes[PlaceFields.AMENITY_IDS])
        return changes

    def find_by_owner(self, owner_id: str) -> List[Place]:
        return self._find_many({PlaceFields.OWNER_ID: owner_id})

    def find_by_amenity(self, amenity_id: str) -> List[Place]:
        # Matches array elements
        return self._find_many({PlaceFields.AMENITY_IDS: amenity_id})
