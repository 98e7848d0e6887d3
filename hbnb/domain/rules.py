"""
Business Rules
==============

Stateless cross-entity checks. Each takes already-validated values plus
read access to the repositories it needs, and raises a typed error when a
rule is broken. The existence checks return the loaded entity so callers
do not read it twice.

recompute_average_rating is the one pure formula here: it never touches
storage, the facade persists the value it returns.
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from hbnb.domain.constants.amenity_fields import AmenityFields
from hbnb.domain.constants.place_fields import PlaceFields
from hbnb.domain.constants.review_fields import ReviewFields
from hbnb.domain.constants.user_fields import UserFields
from hbnb.domain.exceptions import ConflictError, NotFoundError
from hbnb.domain.models import EMPTY_AVERAGE_RATING, Amenity, Place, Review, User
from hbnb.domain.repositories import (
    AmenityRepository,
    PlaceRepository,
    ReviewRepository,
    UserRepository,
)

DEFAULT_RATING_PRECISION = 2


def assert_unique_email(
    users: UserRepository, email: str, exclude_id: Optional[str] = None
) -> None:
    """Fail if another user already has this email (case-insensitive)."""
    existing = users.find_by_email(email)
    if existing is not None and existing.id != exclude_id:
        raise ConflictError(UserFields.EMAIL, email, f"Email '{email}' is already registered")


def assert_unique_amenity_name(
    amenities: AmenityRepository, name: str, exclude_id: Optional[str] = None
) -> None:
    existing = amenities.find_by_name(name)
    if existing is not None and existing.id != exclude_id:
        raise ConflictError(AmenityFields.NAME, name, f"Amenity '{name}' already exists")


def assert_user_exists(users: UserRepository, user_id: str, field: str = ReviewFields.USER_ID) -> User:
    user = users.find_by_id(user_id)
    if user is None:
        raise NotFoundError("user", user_id, field)
    return user


def assert_owner_exists(users: UserRepository, owner_id: str) -> User:
    return assert_user_exists(users, owner_id, PlaceFields.OWNER_ID)


def assert_place_exists(places: PlaceRepository, place_id: str, field: str = ReviewFields.PLACE_ID) -> Place:
    place = places.find_by_id(place_id)
    if place is None:
        raise NotFoundError("place", place_id, field)
    return place


def assert_amenity_exists(amenities: AmenityRepository, amenity_id: str) -> Amenity:
    amenity = amenities.find_by_id(amenity_id)
    if amenity is None:
        raise NotFoundError("amenity", amenity_id, "amenity_id")
    return amenity


def assert_review_exists(reviews: ReviewRepository, review_id: str) -> Review:
    review = reviews.find_by_id(review_id)
    if review is None:
        raise NotFoundError("review", review_id)
    return review


def assert_no_duplicate_review(reviews: ReviewRepository, user_id: str, place_id: str) -> None:
    """A user reviews a given place at most once."""
    if reviews.find_by_user_and_place(user_id, place_id) is not None:
        raise ConflictError(
            ReviewFields.PLACE_ID,
            place_id,
            f"User '{user_id}' has already reviewed place '{place_id}'",
        )


def assert_not_own_place(place: Place, user_id: str) -> None:
    """Owners may not review their own place."""
    if place.owner_id == user_id:
        raise ConflictError(
            ReviewFields.USER_ID,
            user_id,
            f"User '{user_id}' owns place '{place.id}' and cannot review it",
        )


def assert_owns_no_places(places: PlaceRepository, user_id: str) -> None:
    owned = places.find_by_owner(user_id)
    if owned:
        raise ConflictError(
            "places",
            user_id,
            f"User '{user_id}' still owns {len(owned)} place(s)",
        )


def recompute_average_rating(
    place_id: str,
    current_reviews: Iterable[Review],
    precision: int = DEFAULT_RATING_PRECISION,
) -> float:
    """
    Mean rating of the reviews that belong to place_id, rounded half-up.

    Reviews of other places are ignored. Returns EMPTY_AVERAGE_RATING (0.0)
    when the place has no reviews.
    """
    ratings = [review.rating for review in current_reviews if review.place_id == place_id]
    if not ratings:
        return EMPTY_AVERAGE_RATING
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return float(mean.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP))
