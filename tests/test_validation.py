"""Tests for the pure field and entity validators."""
import math

import pytest

from hbnb.domain.exceptions import ValidationError
from hbnb.domain.models import Amenity, Place, Review, User
from hbnb.domain.validation import (
    validate_amenity,
    validate_email,
    validate_latitude,
    validate_longitude,
    validate_password,
    validate_place,
    validate_price,
    validate_rating,
    validate_review,
    validate_user,
)


def _place(**fields):
    values = dict(
        title="Loft", price=80, latitude=10.0, longitude=20.0, owner_id="owner-1"
    )
    values.update(fields)
    return Place(**values)


def test_email_is_stripped_and_lower_cased():
    assert validate_email("  Ada.Lovelace@Example.COM ") == "ada.lovelace@example.com"


@pytest.mark.parametrize(
    "email", ["", "   ", "no-at-sign", "a@", "@example.com", "a@example", "a..b@example.com", 42]
)
def test_invalid_emails_are_rejected(email):
    with pytest.raises(ValidationError) as exc:
        validate_email(email)
    assert exc.value.field == "email"


def test_password_minimum_length():
    assert validate_password("longenough") == "longenough"
    with pytest.raises(ValidationError) as exc:
        validate_password("short")
    assert exc.value.field == "password"


def test_password_minimum_can_be_raised_but_not_lowered():
    with pytest.raises(ValidationError):
        validate_password("tencharsxx", min_length=12)
    with pytest.raises(ValidationError):
        validate_password("seven77", min_length=4)


@pytest.mark.parametrize("price", [0, -1, -0.01, True, "100", None, math.nan, math.inf])
def test_invalid_prices_are_rejected(price):
    with pytest.raises(ValidationError) as exc:
        validate_price(price)
    assert exc.value.field == "price"


def test_valid_price_is_returned_as_float():
    assert validate_price(100) == 100.0
    assert isinstance(validate_price(100), float)
    assert validate_price(0.01) == 0.01


def test_coordinate_bounds_are_inclusive():
    assert validate_latitude(90) == 90.0
    assert validate_latitude(-90) == -90.0
    assert validate_longitude(180) == 180.0
    assert validate_longitude(-180) == -180.0


@pytest.mark.parametrize("latitude", [90.0001, -91, "10", None])
def test_latitude_out_of_range(latitude):
    with pytest.raises(ValidationError) as exc:
        validate_latitude(latitude)
    assert exc.value.field == "latitude"


@pytest.mark.parametrize("longitude", [180.5, -181, False])
def test_longitude_out_of_range(longitude):
    with pytest.raises(ValidationError) as exc:
        validate_longitude(longitude)
    assert exc.value.field == "longitude"


@pytest.mark.parametrize("rating", [1, 2, 3, 4, 5])
def test_ratings_one_to_five_are_accepted(rating):
    assert validate_rating(rating) == rating


@pytest.mark.parametrize("rating", [0, 6, -1, 4.5, True, "5", None])
def test_invalid_ratings_are_rejected(rating):
    with pytest.raises(ValidationError) as exc:
        validate_rating(rating)
    assert exc.value.field == "rating"


def test_validate_user_normalizes_fields():
    user = validate_user(
        User(email="ADA@EXAMPLE.COM", password_hash="x", first_name=" Ada ", last_name="Lovelace")
    )
    assert user.email == "ada@example.com"
    assert user.first_name == "Ada"


@pytest.mark.parametrize("field", ["first_name", "last_name"])
def test_validate_user_requires_names(field):
    values = dict(email="ada@example.com", password_hash="x", first_name="Ada", last_name="L")
    values[field] = "  "
    with pytest.raises(ValidationError) as exc:
        validate_user(User(**values))
    assert exc.value.field == field


def test_validate_user_rejects_overlong_names():
    with pytest.raises(ValidationError) as exc:
        validate_user(
            User(email="ada@example.com", password_hash="x", first_name="A" * 51, last_name="L")
        )
    assert exc.value.field == "first_name"


def test_validate_place_normalizes_fields():
    place = validate_place(_place(title="  Loft  ", description=None, price=80))
    assert place.title == "Loft"
    assert place.description == ""
    assert place.price == 80.0


def test_validate_place_reports_the_offending_field():
    with pytest.raises(ValidationError) as exc:
        validate_place(_place(latitude=120))
    assert exc.value.field == "latitude"

    with pytest.raises(ValidationError) as exc:
        validate_place(_place(title=""))
    assert exc.value.field == "title"

    with pytest.raises(ValidationError) as exc:
        validate_place(_place(title="T" * 101))
    assert exc.value.field == "title"


def test_validate_review_requires_a_comment():
    with pytest.raises(ValidationError) as exc:
        validate_review(Review(rating=4, comment=" ", user_id="u", place_id="p"))
    assert exc.value.field == "comment"


def test_validate_amenity():
    amenity = validate_amenity(Amenity(name=" WiFi ", description=None))
    assert amenity.name == "WiFi"
    assert amenity.description == ""

    with pytest.raises(ValidationError) as exc:
        validate_amenity(Amenity(name="x" * 51))
    assert exc.value.field == "name"
