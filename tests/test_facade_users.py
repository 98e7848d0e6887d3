"""Tests for user operations on the facade."""
from concurrent.futures import ThreadPoolExecutor

import pytest

from hbnb.application.services.hbnb_facade import HBnBFacade
from hbnb.domain.exceptions import ConflictError, NotFoundError, ValidationError
from hbnb.infrastructure.db.memory_database import InMemoryDatabase
from hbnb.infrastructure.db.memory_repositories import (
    InMemoryAmenityRepository,
    InMemoryPlaceRepository,
    InMemoryReviewRepository,
    InMemoryUserRepository,
)
from hbnb.infrastructure.security.werkzeug_hasher import WerkzeugCredentialHasher


def test_create_user_returns_the_public_record(facade, make_user):
    user = make_user(email="Ada@Example.com")

    assert user["email"] == "ada@example.com"
    assert user["first_name"] == "Ada"
    assert "password" not in user
    assert "password_hash" not in user
    assert user["created_at"].endswith("Z")
    assert facade.get_user(user["id"]) == user


def test_email_is_unique_ignoring_case(facade, make_user):
    make_user(email="ada@example.com")
    with pytest.raises(ConflictError) as exc:
        make_user(email="ADA@EXAMPLE.COM")
    assert exc.value.field == "email"
    assert len(facade.list_users()) == 1


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"password": "short"}, "password"),
        ({"email": "not-an-email"}, "email"),
        ({"first_name": " "}, "first_name"),
        ({"is_admin": True}, "is_admin"),
        ({"password": 12345678}, "password"),
    ],
)
def test_invalid_registrations_store_nothing(facade, overrides, field):
    data = {
        "email": "ada@example.com",
        "password": "s3cret-pass",
        "first_name": "Ada",
        "last_name": "Lovelace",
    }
    data.update(overrides)

    with pytest.raises(ValidationError) as exc:
        facade.create_user(data)
    assert exc.value.field == field
    assert facade.list_users() == []


def test_missing_field_is_reported(facade):
    with pytest.raises(ValidationError) as exc:
        facade.create_user({"email": "ada@example.com", "password": "s3cret-pass", "first_name": "Ada"})
    assert exc.value.field == "last_name"


def test_request_must_be_a_mapping(facade):
    with pytest.raises(ValidationError) as exc:
        facade.create_user(["ada@example.com"])
    assert exc.value.field == "body"


def test_unknown_user(facade):
    with pytest.raises(NotFoundError) as exc:
        facade.get_user("missing")
    assert exc.value.entity_id == "missing"


def test_list_users_in_creation_order(facade, make_user):
    created = [make_user() for _ in range(3)]
    assert [user["id"] for user in facade.list_users()] == [user["id"] for user in created]


def test_authenticate_user(facade, make_user):
    user = make_user(email="ada@example.com", password="s3cret-pass")

    assert facade.authenticate_user("ADA@example.com", "s3cret-pass")["id"] == user["id"]
    assert facade.authenticate_user("ada@example.com", "wrong-pass") is None
    assert facade.authenticate_user("nobody@example.com", "s3cret-pass") is None


def test_update_user_names_and_password(facade, make_user):
    user = make_user(email="ada@example.com", password="s3cret-pass")

    updated = facade.update_user(user["id"], {"first_name": "Augusta", "password": "n3w-password"})
    assert updated["first_name"] == "Augusta"
    assert updated["last_name"] == user["last_name"]
    assert facade.authenticate_user("ada@example.com", "n3w-password") is not None
    assert facade.authenticate_user("ada@example.com", "s3cret-pass") is None


def test_update_user_email_must_stay_unique(facade, make_user):
    make_user(email="ada@example.com")
    grace = make_user(email="grace@example.com")

    with pytest.raises(ConflictError):
        facade.update_user(grace["id"], {"email": "Ada@example.com"})

    # Changing only the case of one's own email is allowed
    assert facade.update_user(grace["id"], {"email": "GRACE@example.com"})["email"] == "grace@example.com"


def test_update_user_validation(facade, make_user):
    user = make_user()
    with pytest.raises(ValidationError) as exc:
        facade.update_user(user["id"], {"password": "short"})
    assert exc.value.field == "password"

    with pytest.raises(ValidationError) as exc:
        facade.update_user(user["id"], {"id": "another-id"})
    assert exc.value.field == "id"

    with pytest.raises(NotFoundError):
        facade.update_user("missing", {"first_name": "X"})


def test_delete_user_without_places(facade, make_user, make_place, make_review):
    owner = make_user()
    guest = make_user()
    place = make_place(owner["id"])
    make_review(guest["id"], place["id"], rating=2)

    summary = facade.delete_user(guest["id"])

    assert summary == {"id": guest["id"], "deleted_places": 0, "deleted_reviews": 1, "stale_places": []}
    with pytest.raises(NotFoundError):
        facade.get_user(guest["id"])
    assert facade.list_reviews_by_place(place["id"]) == []
    assert facade.get_place(place["id"])["average_rating"] == 0.0


def test_delete_user_who_owns_places_is_refused(facade, make_user, make_place):
    owner = make_user()
    make_place(owner["id"])

    with pytest.raises(ConflictError) as exc:
        facade.delete_user(owner["id"])
    assert exc.value.field == "places"
    assert facade.get_user(owner["id"])["id"] == owner["id"]


def test_delete_user_cascade(facade, make_user, make_place, make_review):
    owner = make_user()
    guest = make_user()
    other_owner = make_user()
    owned = make_place(owner["id"])
    elsewhere = make_place(other_owner["id"])
    make_review(guest["id"], owned["id"], rating=5)
    make_review(owner["id"], elsewhere["id"], rating=1)
    make_review(guest["id"], elsewhere["id"], rating=4)

    summary = facade.delete_user_cascade(owner["id"])

    assert summary["deleted_places"] == 1
    assert summary["deleted_reviews"] == 2
    assert facade.list_places_by_user(other_owner["id"])[0]["average_rating"] == 4.0
    with pytest.raises(NotFoundError):
        facade.get_place(owned["id"])
    assert [r["user_id"] for r in facade.list_reviews()] == [guest["id"]]


def test_delete_unknown_user(facade):
    with pytest.raises(NotFoundError):
        facade.delete_user("missing")


def test_concurrent_registrations_with_one_email(facade):
    def register(i):
        try:
            facade.create_user(
                {
                    "email": "Same@Example.com" if i % 2 else "same@example.com",
                    "password": "s3cret-pass",
                    "first_name": "User",
                    "last_name": str(i),
                }
            )
            return "created"
        except ConflictError:
            return "conflict"

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(register, range(8)))

    assert results.count("created") == 1
    assert results.count("conflict") == 7
    assert len(facade.list_users()) == 1


class InterleavingReviewRepository(InMemoryReviewRepository):
    """Runs `after_first_lookup` once, right after the first find_by_user call."""

    def __init__(self, database):
        super().__init__(database)
        self.after_first_lookup = None

    def find_by_user(self, user_id):
        found = super().find_by_user(user_id)
        action, self.after_first_lookup = self.after_first_lookup, None
        if action is not None:
            action()
        return found


@pytest.fixture
def interleaving(settings):
    database = InMemoryDatabase()
    reviews = InterleavingReviewRepository(database)
    facade = HBnBFacade(
        InMemoryUserRepository(database),
        InMemoryPlaceRepository(database),
        reviews,
        InMemoryAmenityRepository(database),
        WerkzeugCredentialHasher(settings.password_hash_method),
        settings=settings,
    )
    return facade, reviews


def _register(facade, email):
    return facade.create_user(
        {"email": email, "password": "s3cret-pass", "first_name": "A", "last_name": "B"}
    )


def _list_place(facade, owner_id):
    return facade.create_place(
        {"title": "Loft", "price": 70, "latitude": 0, "longitude": 0, "owner_id": owner_id}
    )


def test_delete_user_skips_a_reviewed_place_deleted_meanwhile(interleaving):
    facade, reviews = interleaving
    owner = _register(facade, "owner@example.com")
    guest = _register(facade, "guest@example.com")
    gone = _list_place(facade, owner["id"])
    kept = _list_place(facade, owner["id"])
    facade.create_review({"rating": 2, "comment": "Meh", "user_id": guest["id"], "place_id": gone["id"]})
    facade.create_review({"rating": 4, "comment": "Good", "user_id": guest["id"], "place_id": kept["id"]})

    reviews.after_first_lookup = lambda: facade.delete_place(gone["id"])
    summary = facade.delete_user(guest["id"])

    assert summary == {"id": guest["id"], "deleted_places": 0, "deleted_reviews": 1, "stale_places": []}
    with pytest.raises(NotFoundError):
        facade.get_user(guest["id"])
    assert facade.get_place(kept["id"])["average_rating"] == 0.0
    assert facade.list_reviews() == []


def test_cascade_delete_skips_an_owned_place_deleted_meanwhile(interleaving):
    facade, reviews = interleaving
    owner = _register(facade, "owner@example.com")
    guest = _register(facade, "guest@example.com")
    gone = _list_place(facade, owner["id"])
    kept = _list_place(facade, owner["id"])
    facade.create_review({"rating": 5, "comment": "Great", "user_id": guest["id"], "place_id": kept["id"]})

    reviews.after_first_lookup = lambda: facade.delete_place(gone["id"])
    summary = facade.delete_user_cascade(owner["id"])

    assert summary["deleted_places"] == 1
    assert summary["deleted_reviews"] == 1
    with pytest.raises(NotFoundError):
        facade.get_user(owner["id"])
    assert facade.list_places() == []
    assert facade.list_reviews() == []
