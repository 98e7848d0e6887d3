"""
HBnB Facade
===========

The single orchestration surface consumed by a presentation layer.

Every operation takes plain mappings / ids and returns plain dicts (never
a password hash) or raises one of the typed errors from
hbnb.domain.exceptions. Mutations are delegated to use cases, each of
which runs validation -> rule checks -> guarded writes -> rating refresh
as one unit of work. Reads are delegated straight to the repositories.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

from hbnb.application.concurrency import AggregateGuard, place_key
from hbnb.application.dto import (
    AmenityResponse,
    PlaceResponse,
    RatedWrite,
    ReviewResponse,
    UserResponse,
)
from hbnb.application.services.rating_refresher import RatingOutcome, RatingRefresher
from hbnb.application.use_cases.amenity.create_amenity import CreateAmenityUseCase
from hbnb.application.use_cases.amenity.delete_amenity import DeleteAmenityUseCase
from hbnb.application.use_cases.amenity.update_amenity import UpdateAmenityUseCase
from hbnb.application.use_cases.place.create_place import CreatePlaceUseCase
from hbnb.application.use_cases.place.delete_place import DeletePlaceUseCase
from hbnb.application.use_cases.place.manage_amenities import ManagePlaceAmenitiesUseCase
from hbnb.application.use_cases.place.update_place import UpdatePlaceUseCase
from hbnb.application.use_cases.review.create_review import CreateReviewUseCase
from hbnb.application.use_cases.review.delete_review import DeleteReviewUseCase
from hbnb.application.use_cases.review.update_review import UpdateReviewUseCase
from hbnb.application.use_cases.user.delete_user import DeleteUserUseCase
from hbnb.application.use_cases.user.register_user import RegisterUserUseCase
from hbnb.application.use_cases.user.update_user import UpdateUserUseCase
from hbnb.core.config import Settings, get_settings
from hbnb.domain.constants.place_fields import PlaceFields
from hbnb.domain.constants.user_fields import UserFields
from hbnb.domain.models.review import Review
from hbnb.domain.repositories import (
    AmenityRepository,
    PlaceRepository,
    ReviewRepository,
    UserRepository,
)
from hbnb.domain.rules import (
    assert_amenity_exists,
    assert_place_exists,
    assert_review_exists,
    assert_user_exists,
)
from hbnb.domain.services.credential_hasher import CredentialHasher

logger = logging.getLogger(__name__)


class HBnBFacade:
    """
    Facade over users, places, reviews and amenities.

    Constructed with concrete repositories satisfying the domain contracts,
    a credential hasher and a concurrency guard; swap any of them for a fake
    in tests.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        place_repository: PlaceRepository,
        review_repository: ReviewRepository,
        amenity_repository: AmenityRepository,
        hasher: CredentialHasher,
        guard: Optional[AggregateGuard] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the facade and its use cases.

        Args:
            user_repository: Repository for user persistence
            place_repository: Repository for place persistence
            review_repository: Repository for review persistence
            amenity_repository: Repository for amenity persistence
            hasher: Credential hashing collaborator
            guard: Concurrency guard (one is created if omitted)
            settings: Rule and retry settings (environment defaults if omitted)
        """
        settings = settings or get_settings()
        guard = guard or AggregateGuard(settings.guard_timeout_seconds)

        self._users = user_repository
        self._places = place_repository
        self._reviews = review_repository
        self._amenities = amenity_repository
        self._hasher = hasher
        self._guard = guard

        self._rating_refresher = RatingRefresher(
            place_repository,
            review_repository,
            precision=settings.rating_precision,
            max_attempts=settings.rating_recompute_attempts,
        )

        self._register_user = RegisterUserUseCase(
            user_repository, hasher, guard, settings.min_password_length
        )
        self._update_user = UpdateUserUseCase(
            user_repository, hasher, guard, settings.min_password_length
        )
        self._delete_place = DeletePlaceUseCase(place_repository, review_repository, guard)
        self._delete_user = DeleteUserUseCase(
            user_repository,
            place_repository,
            review_repository,
            guard,
            self._rating_refresher,
            self._delete_place,
        )

        self._create_place = CreatePlaceUseCase(
            user_repository, place_repository, amenity_repository, guard
        )
        self._update_place = UpdatePlaceUseCase(place_repository, guard)
        self._place_amenities = ManagePlaceAmenitiesUseCase(
            place_repository, amenity_repository, guard
        )

        self._create_review = CreateReviewUseCase(
            user_repository,
            place_repository,
            review_repository,
            guard,
            self._rating_refresher,
            allow_self_review=settings.allow_self_review,
        )
        self._update_review = UpdateReviewUseCase(review_repository, guard, self._rating_refresher)
        self._delete_review = DeleteReviewUseCase(review_repository, guard, self._rating_refresher)

        self._create_amenity = CreateAmenityUseCase(amenity_repository, guard)
        self._update_amenity = UpdateAmenityUseCase(amenity_repository, guard)
        self._delete_amenity = DeleteAmenityUseCase(amenity_repository, place_repository, guard)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def create_user(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Register a user.

        Args:
            data: email, password, first_name, last_name

        Returns:
            The created user (without password hash)
        """
        return UserResponse.from_entity(self._register_user.execute(data)).model_dump()

    def get_user(self, user_id: str) -> Dict[str, Any]:
        user = assert_user_exists(self._users, user_id, UserFields.ID)
        return UserResponse.from_entity(user).model_dump()

    def list_users(self) -> List[Dict[str, Any]]:
        return [UserResponse.from_entity(user).model_dump() for user in self._users.find_all()]

    def update_user(self, user_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Partially update a user (names, email, password)."""
        return UserResponse.from_entity(self._update_user.execute(user_id, data)).model_dump()

    def delete_user(self, user_id: str) -> Dict[str, Any]:
        """Delete a user who owns no places. Raises ConflictError otherwise."""
        return self._delete_user.execute(user_id, cascade=False)

    def delete_user_cascade(self, user_id: str) -> Dict[str, Any]:
        """Delete a user together with their places and reviews."""
        return self._delete_user.execute(user_id, cascade=True)

    def authenticate_user(self, email: str, password: str) -> Optional[Dict[str, Any]]:
        """
        Check credentials.

        Returns:
            The user record when the password matches, None otherwise
        """
        user = self._users.find_by_email(email) if isinstance(email, str) else None
        if user is None or not isinstance(password, str):
            return None
        if not self._hasher.verify(password, user.password_hash):
            logger.debug(f"Rejected credentials for user {user.id}")
            return None
        return UserResponse.from_entity(user).model_dump()

    # ------------------------------------------------------------------
    # Places
    # ------------------------------------------------------------------

    def create_place(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Create a place owned by an existing user.

        Args:
            data: title, description, price, latitude, longitude, owner_id,
                optional amenity_ids

        Returns:
            The created place, average_rating at 0.0
        """
        return PlaceResponse.from_entity(self._create_place.execute(data)).model_dump()

    def get_place(self, place_id: str) -> Dict[str, Any]:
        with self._guard.shared(place_key(place_id)):
            place = assert_place_exists(self._places, place_id, PlaceFields.ID)
        return PlaceResponse.from_entity(place).model_dump()

    def list_places(self) -> List[Dict[str, Any]]:
        return [PlaceResponse.from_entity(place).model_dump() for place in self._places.find_all()]

    def list_places_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        """Places owned by a user. NotFoundError only if the user is unknown."""
        assert_user_exists(self._users, user_id, "user_id")
        return [
            PlaceResponse.from_entity(place).model_dump()
            for place in self._places.find_by_owner(user_id)
        ]

    def update_place(self, place_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        return PlaceResponse.from_entity(self._update_place.execute(place_id, data)).model_dump()

    def delete_place(self, place_id: str) -> Dict[str, Any]:
        """Delete a place, its reviews and its amenity links."""
        return self._delete_place.execute(place_id)

    def add_amenity_to_place(self, place_id: str, amenity_id: str) -> Dict[str, Any]:
        return PlaceResponse.from_entity(self._place_amenities.link(place_id, amenity_id)).model_dump()

    def remove_amenity_from_place(self, place_id: str, amenity_id: str) -> Dict[str, Any]:
        return PlaceResponse.from_entity(self._place_amenities.unlink(place_id, amenity_id)).model_dump()

    def list_place_amenities(self, place_id: str) -> List[Dict[str, Any]]:
        with self._guard.shared(place_key(place_id)):
            place = assert_place_exists(self._places, place_id, PlaceFields.ID)
            amenities = [self._amenities.find_by_id(amenity_id) for amenity_id in place.amenity_ids]
        return [
            AmenityResponse.from_entity(amenity).model_dump()
            for amenity in sorted((a for a in amenities if a is not None), key=lambda a: a.name.lower())
        ]

    def refresh_place_rating(self, place_id: str) -> Dict[str, Any]:
        """
        Recompute and store a place's average rating, e.g. after a review
        write came back stale.

        Raises:
            NotFoundError: If the place does not exist
            ConcurrencyError: If the rating still cannot be written
        """
        with self._guard.exclusive(place_key(place_id)):
            assert_place_exists(self._places, place_id, PlaceFields.ID)
            outcome = self._rating_refresher.refresh(place_id)
            if outcome.stale:
                raise outcome.error
            place = assert_place_exists(self._places, place_id, PlaceFields.ID)
        return PlaceResponse.from_entity(place).model_dump()

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------

    @staticmethod
    def _rated_write(review: Review, outcome: RatingOutcome) -> RatedWrite:
        return RatedWrite(
            record=ReviewResponse.from_entity(review).model_dump(),
            average_rating=outcome.average_rating,
            stale=outcome.stale,
            error=outcome.error,
        )

    def create_review(self, data: Mapping[str, Any]) -> RatedWrite:
        """
        Review a place and refresh its average rating.

        Args:
            data: rating, comment, user_id, place_id

        Returns:
            RatedWrite with the created review and the place's new average
        """
        return self._rated_write(*self._create_review.execute(data))

    def get_review(self, review_id: str) -> Dict[str, Any]:
        """Read a review inside its place's shared section."""
        # place_id never changes, so it is safe to read before locking
        place_id = assert_review_exists(self._reviews, review_id).place_id
        with self._guard.shared(place_key(place_id)):
            review = assert_review_exists(self._reviews, review_id)
        return ReviewResponse.from_entity(review).model_dump()

    def list_reviews(self) -> List[Dict[str, Any]]:
        """
        All reviews. Each record is read atomically, but the list spans
        places and is not a snapshot; use list_reviews_by_place for a
        view consistent with a place's rating.
        """
        return [ReviewResponse.from_entity(review).model_dump() for review in self._reviews.find_all()]

    def list_reviews_by_place(self, place_id: str) -> List[Dict[str, Any]]:
        """Reviews of a place. NotFoundError only if the place is unknown."""
        with self._guard.shared(place_key(place_id)):
            assert_place_exists(self._places, place_id)
            reviews = self._reviews.find_by_place(place_id)
        return [ReviewResponse.from_entity(review).model_dump() for review in reviews]

    def list_reviews_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        """Reviews written by a user; like list_reviews, not a cross-place snapshot."""
        assert_user_exists(self._users, user_id)
        return [
            ReviewResponse.from_entity(review).model_dump()
            for review in self._reviews.find_by_user(user_id)
        ]

    def update_review(self, review_id: str, data: Mapping[str, Any]) -> RatedWrite:
        """Change rating and/or comment; a rating change refreshes the place average."""
        return self._rated_write(*self._update_review.execute(review_id, data))

    def delete_review(self, review_id: str) -> RatedWrite:
        return self._rated_write(*self._delete_review.execute(review_id))

    # ------------------------------------------------------------------
    # Amenities
    # ------------------------------------------------------------------

    def create_amenity(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        return AmenityResponse.from_entity(self._create_amenity.execute(data)).model_dump()

    def get_amenity(self, amenity_id: str) -> Dict[str, Any]:
        amenity = assert_amenity_exists(self._amenities, amenity_id)
        return AmenityResponse.from_entity(amenity).model_dump()

    def list_amenities(self) -> List[Dict[str, Any]]:
        return [
            AmenityResponse.from_entity(amenity).model_dump()
            for amenity in self._amenities.find_all()
        ]

    def update_amenity(self, amenity_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        return AmenityResponse.from_entity(self._update_amenity.execute(amenity_id, data)).model_dump()

    def delete_amenity(self, amenity_id: str) -> Dict[str, Any]:
        """Delete an amenity after unlinking it from every place."""
        return self._delete_amenity.execute(amenity_id)
