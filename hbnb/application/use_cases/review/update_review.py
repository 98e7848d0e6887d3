"""
Update Review Use Case
======================

Business use case for editing a review's rating or comment.
"""
import logging
from typing import Any, Dict, Mapping, Tuple

from hbnb.application.concurrency import AggregateGuard, place_key
from hbnb.application.dto import ReviewUpdateRequest, parse_request
from hbnb.application.services.rating_refresher import RatingOutcome, RatingRefresher
from hbnb.domain.constants.review_fields import ReviewFields
from hbnb.domain.models.review import Review
from hbnb.domain.repositories import ReviewRepository
from hbnb.domain.rules import assert_review_exists
from hbnb.domain.validation import validate_rating, validate_required_text

logger = logging.getLogger(__name__)


class UpdateReviewUseCase:
    """Use case for updating a review; a rating change refreshes the place rating."""

    def __init__(
        self,
        review_repository: ReviewRepository,
        guard: AggregateGuard,
        rating_refresher: RatingRefresher,
    ):
        self._reviews = review_repository
        self._guard = guard
        self._refresher = rating_refresher

    def _validated_changes(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        sent = parse_request(ReviewUpdateRequest, data).model_dump(exclude_unset=True)
        changes: Dict[str, Any] = {}
        if ReviewFields.RATING in sent:
            changes[ReviewFields.RATING] = validate_rating(sent[ReviewFields.RATING])
        if ReviewFields.COMMENT in sent:
            changes[ReviewFields.COMMENT] = validate_required_text(
                ReviewFields.COMMENT, sent[ReviewFields.COMMENT]
            )
        return changes

    def execute(self, review_id: str, data: Mapping[str, Any]) -> Tuple[Review, RatingOutcome]:
        """
        Execute the update review use case.

        Raises:
            ValidationError: If a sent field is malformed
            NotFoundError: If the review does not exist
        """
        changes = self._validated_changes(data)

        # place_id never changes, so it is safe to read before locking
        place_id = assert_review_exists(self._reviews, review_id).place_id

        with self._guard.exclusive(place_key(place_id)):
            current = assert_review_exists(self._reviews, review_id)
            if not changes:
                return current, RatingOutcome(self._refresher.current(place_id))

            updated = self._reviews.update(review_id, changes)
            if updated.rating != current.rating:
                outcome = self._refresher.refresh(place_id)
            else:
                outcome = RatingOutcome(self._refresher.current(place_id))

        logger.info(f"Review {review_id} updated ({', '.join(sorted(changes))})")
        return updated, outcome
