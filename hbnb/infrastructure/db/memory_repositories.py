"""
In-Memory Repositories
======================

Reference implementations of the repository contracts on top of an
injected InMemoryDatabase. Used for tests and for the "memory" storage
backend.
"""
from dataclasses import fields, replace
from typing import Any, Callable, Generic, Iterator, List, Mapping, Optional, Type, TypeVar

from hbnb.domain.exceptions import ConcurrencyError, NotFoundError, PersistenceError
from hbnb.domain.models import Amenity, Place, Review, User
from hbnb.domain.repositories import (
    AmenityRepository,
    PlaceRepository,
    ReviewRepository,
    UserRepository,
)
from hbnb.infrastructure.db.memory_database import InMemoryDatabase
from hbnb.utils.datetime_utils import now

EntityType = TypeVar("EntityType")

# Fields a partial update may never touch
_PROTECTED_FIELDS = {"id", "version", "created_at"}


class InMemoryRepository(Generic[EntityType]):
    """Shared CRUD logic; subclasses add the entity-specific finders."""

    TABLE_NAME = ""
    ENTITY_NAME = ""
    ENTITY_CLASS: Type = object

    def __init__(self, database: InMemoryDatabase):
        self._db = database
        self._table = database.table(self.TABLE_NAME)
        self._field_names = {f.name for f in fields(self.ENTITY_CLASS)}

    def _select(self, predicate: Callable[[EntityType], bool]) -> List[EntityType]:
        with self._db.lock:
            return [entity for entity in self._table.values() if predicate(entity)]

    def save(self, entity: EntityType) -> EntityType:
        with self._db.lock:
            if entity.id in self._table:
                raise PersistenceError(
                    "save", f"{self.ENTITY_NAME} '{entity.id}' already exists", entity.id
                )
            self._table[entity.id] = entity
        return entity

    def find_by_id(self, entity_id: str) -> Optional[EntityType]:
        with self._db.lock:
            return self._table.get(entity_id)

    def update(
        self,
        entity_id: str,
        partial: Mapping[str, Any],
        expected_version: Optional[int] = None,
    ) -> EntityType:
        unknown = set(partial) - (self._field_names - _PROTECTED_FIELDS)
        if unknown:
            raise PersistenceError(
                "update", f"cannot set {', '.join(sorted(unknown))} on {self.ENTITY_NAME}", entity_id
            )

        with self._db.lock:
            current = self._table.get(entity_id)
            if current is None:
                raise NotFoundError(self.ENTITY_NAME, entity_id)
            if expected_version is not None and current.version != expected_version:
                raise ConcurrencyError(
                    self.ENTITY_NAME,
                    entity_id,
                    f"{self.ENTITY_NAME.capitalize()} '{entity_id}' is at version "
                    f"{current.version}, expected {expected_version}",
                )
            changes = dict(partial)
            if "updated_at" in self._field_names:
                changes.setdefault("updated_at", now())
            updated = replace(current, version=current.version + 1, **changes)
            self._table[entity_id] = updated
        return updated

    def delete(self, entity_id: str) -> None:
        with self._db.lock:
            if self._table.pop(entity_id, None) is None:
                raise NotFoundError(self.ENTITY_NAME, entity_id)

    def find_all(self) -> Iterator[EntityType]:
        with self._db.lock:
            snapshot = list(self._table.values())
        yield from snapshot


class InMemoryUserRepository(InMemoryRepository[User], UserRepository):
    TABLE_NAME = "users"
    ENTITY_NAME = "user"
    ENTITY_CLASS = User

    def find_by_email(self, email: str) -> Optional[User]:
        key = email.strip().lower()
        matches = self._select(lambda user: user.email.lower() == key)
        return matches[0] if matches else None


class InMemoryPlaceRepository(InMemoryRepository[Place], PlaceRepository):
    TABLE_NAME = "places"
    ENTITY_NAME = "place"
    ENTITY_CLASS = Place

    def find_by_owner(self, owner_id: str) -> List[Place]:
        return self._select(lambda place: place.owner_id == owner_id)

    def find_by_amenity(self, amenity_id: str) -> List[Place]:
        return self._select(lambda place: place.has_amenity(amenity_id))


class InMemoryReviewRepository(InMemoryRepository[Review], ReviewRepository):
    TABLE_NAME = "reviews"
    ENTITY_NAME = "review"
    ENTITY_CLASS = Review

    def find_by_place(self, place_id: str) -> List[Review]:
        return self._select(lambda review: review.place_id == place_id)

    def find_by_user(self, user_id: str) -> List[Review]:
        return self._select(lambda review: review.user_id == user_id)

    def find_by_user_and_place(self, user_id: str, place_id: str) -> Optional[Review]:
        matches = self._select(
            lambda review: review.user_id == user_id and review.place_id == place_id
        )
        return matches[0] if matches else None


class InMemoryAmenityRepository(InMemoryRepository[Amenity], AmenityRepository):
    TABLE_NAME = "amenities"
    ENTITY_NAME = "amenity"
    ENTITY_CLASS = Amenity

    def find_by_name(self, name: str) -> Optional[Amenity]:
        key = name.strip().lower()
        matches = self._select(lambda amenity: amenity.name.lower() == key)
        return matches[0] if matches else None
