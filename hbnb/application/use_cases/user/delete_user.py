"""
Delete User Use Case
====================

Guarded and cascading user deletion.
"""
import logging
from typing import Any, Dict

from hbnb.application.concurrency import AggregateGuard, place_key, user_key
from hbnb.application.services.rating_refresher import RatingRefresher
from hbnb.application.use_cases.place.delete_place import DeletePlaceUseCase
from hbnb.domain.constants.user_fields import UserFields
from hbnb.domain.repositories import PlaceRepository, ReviewRepository, UserRepository
from hbnb.domain.rules import assert_owns_no_places, assert_user_exists

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Use case for deleting a user.

    Without cascade, a user who still owns places cannot be deleted.
    With cascade, owned places go first (with their reviews and amenity
    links). In both modes the user's reviews of other places are removed
    and those places get their rating recomputed.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        place_repository: PlaceRepository,
        review_repository: ReviewRepository,
        guard: AggregateGuard,
        rating_refresher: RatingRefresher,
        delete_place_use_case: DeletePlaceUseCase,
    ):
        self._users = user_repository
        self._places = place_repository
        self._reviews = review_repository
        self._guard = guard
        self._refresher = rating_refresher
        self._delete_place = delete_place_use_case

    def execute(self, user_id: str, cascade: bool = False) -> Dict[str, Any]:
        """
        Execute the delete user use case.

        Returns:
            Summary with deleted_places, deleted_reviews and stale_places

        Raises:
            NotFoundError: If the user does not exist
            ConflictError: If the user owns places and cascade is False
        """
        # Holding the user lock blocks new places and reviews by this user
        with self._guard.exclusive(user_key(user_id)):
            assert_user_exists(self._users, user_id, UserFields.ID)
            if not cascade:
                assert_owns_no_places(self._places, user_id)

            owned_ids = [place.id for place in self._places.find_by_owner(user_id)]
            reviewed_ids = sorted(
                {review.place_id for review in self._reviews.find_by_user(user_id)} - set(owned_ids)
            )

            deleted_reviews = 0
            stale_places = []
            with self._guard.exclusive(*[place_key(pid) for pid in owned_ids + reviewed_ids]):
                # A place may have been deleted before its lock was taken
                owned_ids = [pid for pid in owned_ids if self._places.find_by_id(pid) is not None]
                reviewed_ids = [pid for pid in reviewed_ids if self._places.find_by_id(pid) is not None]

                for place_id in owned_ids:
                    deleted_reviews += self._delete_place.remove(place_id)["deleted_reviews"]

                for review in self._reviews.find_by_user(user_id):
                    self._reviews.delete(review.id)
                    deleted_reviews += 1

                for place_id in reviewed_ids:
                    if self._refresher.refresh(place_id).stale:
                        stale_places.append(place_id)

                self._users.delete(user_id)

        logger.info(
            f"User {user_id} deleted (cascade={cascade}, places={len(owned_ids)}, "
            f"reviews={deleted_reviews})"
        )
        return {
            "id": user_id,
            "deleted_places": len(owned_ids),
            "deleted_reviews": deleted_reviews,
            "stale_places": stale_places,
        }
