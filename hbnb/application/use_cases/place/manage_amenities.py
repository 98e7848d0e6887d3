"""
Place Amenities Use Case
========================

Links and unlinks amenities on a place.
"""
import logging

from hbnb.application.concurrency import AggregateGuard, amenity_key, place_key
from hbnb.domain.constants.place_fields import PlaceFields
from hbnb.domain.exceptions import NotFoundError
from hbnb.domain.models.place import Place
from hbnb.domain.repositories import AmenityRepository, PlaceRepository
from hbnb.domain.rules import assert_amenity_exists, assert_place_exists

logger = logging.getLogger(__name__)


class ManagePlaceAmenitiesUseCase:
    """Use case for the place/amenity association."""

    def __init__(
        self,
        place_repository: PlaceRepository,
        amenity_repository: AmenityRepository,
        guard: AggregateGuard,
    ):
        self._places = place_repository
        self._amenities = amenity_repository
        self._guard = guard

    def link(self, place_id: str, amenity_id: str) -> Place:
        """
        Link an amenity to a place. Linking twice is a no-op.

        Raises:
            NotFoundError: If the place or the amenity does not exist
        """
        with self._guard.exclusive(amenity_key(amenity_id), place_key(place_id)):
            place = assert_place_exists(self._places, place_id, PlaceFields.ID)
            assert_amenity_exists(self._amenities, amenity_id)
            if place.has_amenity(amenity_id):
                return place
            updated = self._places.update(
                place_id, {PlaceFields.AMENITY_IDS: place.amenity_ids + (amenity_id,)}
            )

        logger.info(f"Amenity {amenity_id} linked to place {place_id}")
        return updated

    def unlink(self, place_id: str, amenity_id: str) -> Place:
        """
        Remove an amenity from a place.

        Raises:
            NotFoundError: If the place does not exist or does not have
                this amenity
        """
        with self._guard.exclusive(place_key(place_id)):
            place = assert_place_exists(self._places, place_id, PlaceFields.ID)
            if not place.has_amenity(amenity_id):
                raise NotFoundError("amenity", amenity_id, "amenity_id")
            updated = self._places.update(
                place_id,
                {PlaceFields.AMENITY_IDS: tuple(a for a in place.amenity_ids if a != amenity_id)},
            )

        logger.info(f"Amenity {amenity_id} unlinked from place {place_id}")
        return updated
