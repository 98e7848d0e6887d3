"""
Delete Amenity Use Case
=======================
"""
import logging
from typing import Any, Dict

from hbnb.application.concurrency import AggregateGuard, amenity_key, place_key
from hbnb.domain.constants.place_fields import PlaceFields
from hbnb.domain.repositories import AmenityRepository, PlaceRepository
from hbnb.domain.rules import assert_amenity_exists

logger = logging.getLogger(__name__)


class DeleteAmenityUseCase:
    """
    Use case for deleting an amenity.

    The amenity is unlinked from every place before it is deleted, so no
    place ever references a missing amenity.
    """

    def __init__(
        self,
        amenity_repository: AmenityRepository,
        place_repository: PlaceRepository,
        guard: AggregateGuard,
    ):
        self._amenities = amenity_repository
        self._places = place_repository
        self._guard = guard

    def execute(self, amenity_id: str) -> Dict[str, Any]:
        """
        Returns:
            Summary with unlinked_places

        Raises:
            NotFoundError: If the amenity does not exist
        """
        # Holding the amenity lock blocks new links to it
        with self._guard.exclusive(amenity_key(amenity_id)):
            assert_amenity_exists(self._amenities, amenity_id)
            linked = [place.id for place in self._places.find_by_amenity(amenity_id)]

            with self._guard.exclusive(*[place_key(pid) for pid in linked]):
                for place_id in linked:
                    place = self._places.find_by_id(place_id)
                    if place is None or not place.has_amenity(amenity_id):
                        continue
                    self._places.update(
                        place_id,
                        {PlaceFields.AMENITY_IDS: tuple(a for a in place.amenity_ids if a != amenity_id)},
                    )
                self._amenities.delete(amenity_id)

        logger.info(f"Amenity {amenity_id} deleted and unlinked from {len(linked)} place(s)")
        return {"id": amenity_id, "unlinked_places": len(linked)}
