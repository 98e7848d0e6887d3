"""
Rating Refresher
================

Recomputes and persists a place's average rating. Callers run it inside
the place's exclusive section, right after the review write that
triggered it.
"""
import logging
from typing import NamedTuple, Optional

from hbnb.domain.constants.place_fields import PlaceFields
from hbnb.domain.exceptions import ConcurrencyError, NotFoundError, PersistenceError
from hbnb.domain.models import EMPTY_AVERAGE_RATING
from hbnb.domain.repositories import PlaceRepository, ReviewRepository
from hbnb.domain.rules import recompute_average_rating

logger = logging.getLogger(__name__)


class RatingOutcome(NamedTuple):
    average_rating: float
    stale: bool = False
    error: Optional[ConcurrencyError] = None


class RatingRefresher:
    """
    Writes the derived average rating with an optimistic version check.

    A lost race or a store failure is retried up to max_attempts times.
    When every attempt fails the outcome is flagged stale instead of
    raising, because the review write that triggered the refresh has
    already been committed and must not be reported as failed.
    """

    def __init__(
        self,
        place_repository: PlaceRepository,
        review_repository: ReviewRepository,
        precision: int = 2,
        max_attempts: int = 3,
    ):
        self._places = place_repository
        self._reviews = review_repository
        self._precision = precision
        self._max_attempts = max(1, max_attempts)

    def current(self, place_id: str) -> float:
        """Average rating currently stored on the place."""
        place = self._places.find_by_id(place_id)
        if place is None:
            raise NotFoundError("place", place_id, "place_id")
        return place.average_rating

    def refresh(self, place_id: str) -> RatingOutcome:
        last_error: Optional[Exception] = None
        last_known = None

        for attempt in range(1, self._max_attempts + 1):
            try:
                place = self._places.find_by_id(place_id)
                if place is None:
                    raise NotFoundError("place", place_id, "place_id")
                last_known = place.average_rating

                average = recompute_average_rating(
                    place_id, self._reviews.find_by_place(place_id), self._precision
                )
                if average == place.average_rating:
                    return RatingOutcome(average)

                updated = self._places.update(
                    place_id,
                    {PlaceFields.AVERAGE_RATING: average},
                    expected_version=place.version,
                )
                logger.debug(f"Place {place_id} average rating {place.average_rating} -> {average}")
                return RatingOutcome(updated.average_rating)
            except (ConcurrencyError, PersistenceError) as e:
                last_error = e
                logger.warning(
                    f"Rating refresh of place {place_id} failed "
                    f"(attempt {attempt}/{self._max_attempts}): {e}"
                )

        error = ConcurrencyError(
            "place",
            place_id,
            f"Average rating of place '{place_id}' is stale after "
            f"{self._max_attempts} attempts: {last_error}",
        )
        error.__cause__ = last_error
        logger.warning(error.message)
        return RatingOutcome(
            last_known if last_known is not None else EMPTY_AVERAGE_RATING,
            stale=True,
            error=error,
        )
