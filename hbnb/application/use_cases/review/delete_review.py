"""
Delete Review Use Case
======================

Deletes a review and refreshes the place rating in the same unit of work.
"""
import logging
from typing import Tuple

from hbnb.application.concurrency import AggregateGuard, place_key
from hbnb.application.services.rating_refresher import RatingOutcome, RatingRefresher
from hbnb.domain.models.review import Review
from hbnb.domain.repositories import ReviewRepository
from hbnb.domain.rules import assert_review_exists

logger = logging.getLogger(__name__)


class DeleteReviewUseCase:
    def __init__(
        self,
        review_repository: ReviewRepository,
        guard: AggregateGuard,
        rating_refresher: RatingRefresher,
    ):
        self._reviews = review_repository
        self._guard = guard
        self._refresher = rating_refresher

    def execute(self, review_id: str) -> Tuple[Review, RatingOutcome]:
        """
        Execute the delete review use case.

        Returns:
            The deleted review and the outcome of the rating refresh

        Raises:
            NotFoundError: If the review does not exist
        """
        place_id = assert_review_exists(self._reviews, review_id).place_id

        with self._guard.exclusive(place_key(place_id)):
            review = assert_review_exists(self._reviews, review_id)
            self._reviews.delete(review_id)
            outcome = self._refresher.refresh(place_id)

        logger.info(f"Review {review_id} of place {place_id} deleted")
        return review, outcome
