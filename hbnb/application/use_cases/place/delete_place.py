"""
Delete Place Use Case
=====================

Deletes a place together with its reviews and amenity links.
"""
import logging
from typing import Any, Dict

from hbnb.application.concurrency import AggregateGuard, place_key
from hbnb.domain.constants.place_fields import PlaceFields
from hbnb.domain.repositories import PlaceRepository, ReviewRepository
from hbnb.domain.rules import assert_place_exists

logger = logging.getLogger(__name__)


class DeletePlaceUseCase:
    """
    Use case for deleting a place.

    Reviews are deleted first, then the amenity links are cleared, then
    the place itself goes. Amenities survive.
    """

    def __init__(
        self,
        place_repository: PlaceRepository,
        review_repository: ReviewRepository,
        guard: AggregateGuard,
    ):
        self._places = place_repository
        self._reviews = review_repository
        self._guard = guard

    def execute(self, place_id: str) -> Dict[str, Any]:
        """
        Execute the delete place use case.

        Returns:
            Summary with deleted_reviews and removed_amenity_links

        Raises:
            NotFoundError: If the place does not exist
        """
        with self._guard.exclusive(place_key(place_id)):
            summary = self.remove(place_id)

        logger.info(
            f"Place {place_id} deleted with {summary['deleted_reviews']} review(s) "
            f"and {summary['removed_amenity_links']} amenity link(s)"
        )
        return summary

    def remove(self, place_id: str) -> Dict[str, Any]:
        """Cascade deletion; the caller must hold the place's exclusive section."""
        place = assert_place_exists(self._places, place_id, PlaceFields.ID)

        reviews = self._reviews.find_by_place(place_id)
        for review in reviews:
            self._reviews.delete(review.id)

        if place.amenity_ids:
            self._places.update(place_id, {PlaceFields.AMENITY_IDS: ()})

        self._places.delete(place_id)
        return {
            "id": place_id,
            "deleted_reviews": len(reviews),
            "removed_amenity_links": len(place.amenity_ids),
        }
