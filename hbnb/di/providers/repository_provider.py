from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.repositories import (
    AmenityRepository,
    PlaceRepository,
    ReviewRepository,
    UserRepository,
)
from ...infrastructure.db.memory_repositories import (
    InMemoryAmenityRepository,
    InMemoryPlaceRepository,
    InMemoryReviewRepository,
    InMemoryUserRepository,
)
from ...infrastructure.db.mongo_amenity_repository import MongoAmenityRepository
from ...infrastructure.db.mongo_connection import MongoConnection
from ...infrastructure.db.mongo_place_repository import MongoPlaceRepository
from ...infrastructure.db.mongo_review_repository import MongoReviewRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the storage handle from the database provider and creates repository instances.
        """
        database = container.get("database")

        # Domain interfaces -> Infrastructure implementations
        if isinstance(database, MongoConnection):
            settings: Settings = container.get(Settings)
            container.register_singleton(
                UserRepository, MongoUserRepository(database, settings.users_collection)
            )
            container.register_singleton(
                PlaceRepository, MongoPlaceRepository(database, settings.places_collection)
            )
            container.register_singleton(
                ReviewRepository, MongoReviewRepository(database, settings.reviews_collection)
            )
            container.register_singleton(
                AmenityRepository, MongoAmenityRepository(database, settings.amenities_collection)
            )
        else:
            container.register_singleton(UserRepository, InMemoryUserRepository(database))
            container.register_singleton(PlaceRepository, InMemoryPlaceRepository(database))
            container.register_singleton(ReviewRepository, InMemoryReviewRepository(database))
            container.register_singleton(AmenityRepository, InMemoryAmenityRepository(database))
