"""
Create Review Use Case
======================

Business use case for reviewing a place. The review insert and the
refresh of the place's average rating form one unit of work.
"""
import logging
from typing import Any, Mapping, Tuple

from hbnb.application.concurrency import AggregateGuard, place_key, user_key
from hbnb.application.dto import ReviewCreateRequest, parse_request
from hbnb.application.services.rating_refresher import RatingOutcome, RatingRefresher
from hbnb.domain.models.review import Review
from hbnb.domain.repositories import PlaceRepository, ReviewRepository, UserRepository
from hbnb.domain.rules import (
    assert_no_duplicate_review,
    assert_not_own_place,
    assert_place_exists,
    assert_user_exists,
)
from hbnb.domain.validation import validate_review

logger = logging.getLogger(__name__)


class CreateReviewUseCase:
    """
    Use case for creating a review.

    Holds the author's and the place's exclusive sections from the rule
    checks through the rating refresh, so concurrent reviews of one place
    apply one at a time and readers never see the review without its
    rating.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        place_repository: PlaceRepository,
        review_repository: ReviewRepository,
        guard: AggregateGuard,
        rating_refresher: RatingRefresher,
        allow_self_review: bool = False,
    ):
        self._users = user_repository
        self._places = place_repository
        self._reviews = review_repository
        self._guard = guard
        self._refresher = rating_refresher
        self._allow_self_review = allow_self_review

    def execute(self, data: Mapping[str, Any]) -> Tuple[Review, RatingOutcome]:
        """
        Execute the create review use case.

        Args:
            data: rating, comment, user_id, place_id

        Returns:
            Created review and the outcome of the rating refresh

        Raises:
            ValidationError: If a field is missing or the rating is out of range
            NotFoundError: If the user or the place does not exist
            ConflictError: If the user already reviewed the place or owns it
        """
        request = parse_request(ReviewCreateRequest, data)
        review = validate_review(
            Review(
                rating=request.rating,
                comment=request.comment,
                user_id=request.user_id,
                place_id=request.place_id,
            )
        )

        with self._guard.exclusive(user_key(review.user_id), place_key(review.place_id)):
            assert_user_exists(self._users, review.user_id)
            place = assert_place_exists(self._places, review.place_id)
            if not self._allow_self_review:
                assert_not_own_place(place, review.user_id)
            assert_no_duplicate_review(self._reviews, review.user_id, review.place_id)

            saved = self._reviews.save(review)
            outcome = self._refresher.refresh(review.place_id)

        logger.info(
            f"Review {saved.id} ({saved.rating}/5) of place {saved.place_id} by user {saved.user_id}"
        )
        return saved, outcome
