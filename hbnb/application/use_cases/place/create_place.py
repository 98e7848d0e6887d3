"""
Create Place Use Case
=====================

Business use case for listing a new place.
"""
import logging
from typing import Any, Mapping

from hbnb.application.concurrency import AggregateGuard, amenity_key, user_key
from hbnb.application.dto import PlaceCreateRequest, parse_request
from hbnb.domain.models.place import EMPTY_AVERAGE_RATING, Place
from hbnb.domain.repositories import AmenityRepository, PlaceRepository, UserRepository
from hbnb.domain.rules import assert_amenity_exists, assert_owner_exists
from hbnb.domain.validation import validate_place

logger = logging.getLogger(__name__)


class CreatePlaceUseCase:
    """
    Use case for creating a place.

    The owner lock keeps the owner from being deleted mid-creation and the
    amenity locks do the same for the amenities linked up front.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        place_repository: PlaceRepository,
        amenity_repository: AmenityRepository,
        guard: AggregateGuard,
    ):
        self._users = user_repository
        self._places = place_repository
        self._amenities = amenity_repository
        self._guard = guard

    def execute(self, data: Mapping[str, Any]) -> Place:
        """
        Execute the create place use case.

        Args:
            data: title, description, price, latitude, longitude, owner_id
                and optionally amenity_ids

        Returns:
            Created place with the empty-set average rating

        Raises:
            ValidationError: If a field is missing or out of range
            NotFoundError: If the owner or an amenity does not exist
        """
        request = parse_request(PlaceCreateRequest, data)
        place = validate_place(
            Place(
                title=request.title,
                description=request.description,
                price=request.price,
                latitude=request.latitude,
                longitude=request.longitude,
                owner_id=request.owner_id,
                # Drop duplicates, keep first-seen order
                amenity_ids=tuple(dict.fromkeys(request.amenity_ids)),
                average_rating=EMPTY_AVERAGE_RATING,
            )
        )

        keys = [user_key(place.owner_id)] + [amenity_key(a) for a in place.amenity_ids]
        with self._guard.exclusive(*keys):
            assert_owner_exists(self._users, place.owner_id)
            for amenity_id in place.amenity_ids:
                assert_amenity_exists(self._amenities, amenity_id)
            saved = self._places.save(place)

        logger.info(f"Place {saved.id} created by user {saved.owner_id}")
        return saved
