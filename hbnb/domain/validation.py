"""
Domain Validation
=================

Pure field and entity validators. None of them performs I/O, so they can be
unit-tested without repositories.

Each validator returns the accepted (normalized) value or record, or raises
ValidationError naming the offending field.
"""
import math
import re
from dataclasses import replace
from numbers import Real
from typing import Any, Optional

from hbnb.domain.constants.amenity_fields import AmenityFields
from hbnb.domain.constants.place_fields import PlaceFields
from hbnb.domain.constants.review_fields import ReviewFields
from hbnb.domain.constants.user_fields import UserFields
from hbnb.domain.exceptions import ValidationError
from hbnb.domain.models import Amenity, Place, Review, User

MIN_PASSWORD_LENGTH = 8
MIN_RATING = 1
MAX_RATING = 5
MAX_NAME_LENGTH = 50
MAX_TITLE_LENGTH = 100
MAX_EMAIL_LENGTH = 254

_EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+"
    r"[A-Za-z]{2,63}$"
)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid quantity
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_required_text(field: str, value: Any, max_length: Optional[int] = None) -> str:
    """Require a non-blank string, returned stripped."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, f"{field} is required")
    value = value.strip()
    if max_length is not None and len(value) > max_length:
        raise ValidationError(field, f"{field} must be at most {max_length} characters")
    return value


def validate_optional_text(field: str, value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(field, f"{field} must be a string")
    return value.strip()


def validate_email(email: Any) -> str:
    """
    Validate an email address and return it normalized (stripped, lower-cased).

    Uniqueness is compared case-insensitively, so storing the lower-cased form
    keeps every lookup a plain equality.
    """
    value = validate_required_text(UserFields.EMAIL, email, MAX_EMAIL_LENGTH)
    if not _EMAIL_PATTERN.match(value):
        raise ValidationError(UserFields.EMAIL, f"'{value}' is not a valid email address")
    return value.lower()


def validate_password(password: Any, min_length: int = MIN_PASSWORD_LENGTH) -> str:
    """Check the plaintext password before it is hashed."""
    if not isinstance(password, str):
        raise ValidationError(UserFields.PASSWORD, "password must be a string")
    if len(password) < max(min_length, MIN_PASSWORD_LENGTH):
        raise ValidationError(
            UserFields.PASSWORD,
            f"password must be at least {max(min_length, MIN_PASSWORD_LENGTH)} characters",
        )
    return password


def validate_price(price: Any) -> float:
    if not _is_number(price) or not math.isfinite(price):
        raise ValidationError(PlaceFields.PRICE, "price must be a number")
    if price <= 0:
        raise ValidationError(PlaceFields.PRICE, "price must be greater than 0")
    return float(price)


def _validate_coordinate(field: str, value: Any, bound: float) -> float:
    if not _is_number(value) or not math.isfinite(value):
        raise ValidationError(field, f"{field} must be a number")
    if not -bound <= value <= bound:
        raise ValidationError(field, f"{field} must be between {-bound:g} and {bound:g}")
    return float(value)


def validate_latitude(latitude: Any) -> float:
    return _validate_coordinate(PlaceFields.LATITUDE, latitude, 90.0)


def validate_longitude(longitude: Any) -> float:
    return _validate_coordinate(PlaceFields.LONGITUDE, longitude, 180.0)


def validate_rating(rating: Any) -> int:
    """Ratings are whole numbers from 1 to 5."""
    if not isinstance(rating, int) or isinstance(rating, bool):
        raise ValidationError(ReviewFields.RATING, "rating must be an integer")
    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValidationError(
            ReviewFields.RATING, f"rating must be between {MIN_RATING} and {MAX_RATING}"
        )
    return rating


def validate_user(user: User) -> User:
    """Validate a user record (password is checked before hashing, not here)."""
    return replace(
        user,
        email=validate_email(user.email),
        first_name=validate_required_text(UserFields.FIRST_NAME, user.first_name, MAX_NAME_LENGTH),
        last_name=validate_required_text(UserFields.LAST_NAME, user.last_name, MAX_NAME_LENGTH),
    )


def validate_place(place: Place) -> Place:
    return replace(
        place,
        title=validate_required_text(PlaceFields.TITLE, place.title, MAX_TITLE_LENGTH),
        description=validate_optional_text(PlaceFields.DESCRIPTION, place.description),
        price=validate_price(place.price),
        latitude=validate_latitude(place.latitude),
        longitude=validate_longitude(place.longitude),
        owner_id=validate_required_text(PlaceFields.OWNER_ID, place.owner_id),
    )


def validate_review(review: Review) -> Review:
    return replace(
        review,
        rating=validate_rating(review.rating),
        comment=validate_required_text(ReviewFields.COMMENT, review.comment),
        user_id=validate_required_text(ReviewFields.USER_ID, review.user_id),
        place_id=validate_required_text(ReviewFields.PLACE_ID, review.place_id),
    )


def validate_amenity(amenity: Amenity) -> Amenity:
    return replace(
        amenity,
        name=validate_required_text(AmenityFields.NAME, amenity.name, MAX_NAME_LENGTH),
        description=validate_optional_text(AmenityFields.DESCRIPTION, amenity.description),
    )
