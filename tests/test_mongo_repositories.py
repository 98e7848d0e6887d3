"""Tests for the MongoDB repositories, run against mongomock."""
import types

import pytest

mongomock = pytest.importorskip("mongomock")

from hbnb.application.services.hbnb_facade import HBnBFacade  # noqa: E402
from hbnb.di import build_facade  # noqa: E402
from hbnb.domain.exceptions import (  # noqa: E402
    ConcurrencyError,
    ConflictError,
    NotFoundError,
    PersistenceError,
)
from hbnb.domain.models import Amenity, Place, Review, User  # noqa: E402
from hbnb.infrastructure.db.mongo_amenity_repository import MongoAmenityRepository  # noqa: E402
from hbnb.infrastructure.db.mongo_connection import MongoConnection  # noqa: E402
from hbnb.infrastructure.db.mongo_place_repository import MongoPlaceRepository  # noqa: E402
from hbnb.infrastructure.db.mongo_repository import MongoRepository  # noqa: E402
from hbnb.infrastructure.db.mongo_review_repository import MongoReviewRepository  # noqa: E402
from hbnb.infrastructure.db.mongo_user_repository import MongoUserRepository  # noqa: E402
from tests.conftest import make_settings  # noqa: E402


@pytest.fixture
def mongo_settings():
    return make_settings(storage_backend="mongo", mongo_database_name="hbnb_test")


@pytest.fixture
def connection(mongo_settings):
    connection = MongoConnection(mongo_settings, client=mongomock.MongoClient())
    yield connection
    connection.close()


def _user(email="ada@example.com"):
    return User(email=email, password_hash="hash", first_name="Ada", last_name="Lovelace")


def test_user_roundtrip(connection):
    users = MongoUserRepository(connection)
    user = users.save(_user())

    found = users.find_by_id(user.id)
    assert found.email == user.email
    assert found.version == 1
    assert found.created_at.tzinfo is not None
    assert users.find_by_email("ADA@example.com").id == user.id
    assert users.find_by_id("missing") is None


def test_duplicate_email_is_a_persistence_error(connection):
    users = MongoUserRepository(connection)
    users.save(_user())
    with pytest.raises(PersistenceError):
        users.save(_user())


def test_versioned_update(connection):
    users = MongoUserRepository(connection)
    user = users.save(_user())

    updated = users.update(user.id, {"first_name": "Augusta"}, expected_version=1)
    assert updated.first_name == "Augusta"
    assert updated.version == 2

    with pytest.raises(ConcurrencyError):
        users.update(user.id, {"first_name": "Ada"}, expected_version=1)
    with pytest.raises(NotFoundError):
        users.update("missing", {"first_name": "Ada"})
    with pytest.raises(PersistenceError):
        users.update(user.id, {"version": 7})


def test_delete(connection):
    users = MongoUserRepository(connection)
    user = users.save(_user())
    users.delete(user.id)
    assert users.find_by_id(user.id) is None
    with pytest.raises(NotFoundError):
        users.delete(user.id)


def test_find_all_streams_in_insertion_order(connection):
    users = MongoUserRepository(connection)
    saved = [users.save(_user(f"user{i}@example.com")) for i in range(3)]

    result = users.find_all()
    assert isinstance(result, types.GeneratorType)
    assert [user.id for user in result] == [user.id for user in saved]


def test_place_amenity_ids_roundtrip(connection):
    places = MongoPlaceRepository(connection)
    place = places.save(
        Place(title="Loft", price=50.0, latitude=1.0, longitude=2.0, owner_id="u1", amenity_ids=("a1", "a2"))
    )

    assert places.find_by_id(place.id).amenity_ids == ("a1", "a2")
    assert [p.id for p in places.find_by_amenity("a2")] == [place.id]
    assert [p.id for p in places.find_by_owner("u1")] == [place.id]

    updated = places.update(place.id, {"amenity_ids": ("a1",)})
    assert updated.amenity_ids == ("a1",)
    assert places.find_by_amenity("a2") == []


def test_one_review_per_user_and_place_is_indexed(connection):
    reviews = MongoReviewRepository(connection)
    reviews.save(Review(rating=4, comment="ok", user_id="u1", place_id="p1"))

    with pytest.raises(PersistenceError):
        reviews.save(Review(rating=2, comment="again", user_id="u1", place_id="p1"))
    assert reviews.find_by_user_and_place("u1", "p1").rating == 4
    assert len(reviews.find_by_place("p1")) == 1


def test_amenity_name_lookup_follows_renames(connection):
    amenities = MongoAmenityRepository(connection)
    amenity = amenities.save(Amenity(name="WiFi"))

    assert amenities.find_by_name("wifi").id == amenity.id
    amenities.update(amenity.id, {"name": "Fibre"})
    assert amenities.find_by_name("wifi") is None
    assert amenities.find_by_name("FIBRE").id == amenity.id


def test_facade_on_mongo_backend(mongo_settings):
    facade = build_facade(mongo_settings, mongo_client=mongomock.MongoClient())
    assert isinstance(facade, HBnBFacade)

    owner = facade.create_user(
        {"email": "owner@example.com", "password": "s3cret-pass", "first_name": "O", "last_name": "W"}
    )
    guest = facade.create_user(
        {"email": "guest@example.com", "password": "s3cret-pass", "first_name": "G", "last_name": "U"}
    )
    place = facade.create_place(
        {"title": "Loft", "price": 90, "latitude": 1, "longitude": 2, "owner_id": owner["id"]}
    )

    write = facade.create_review(
        {"rating": 4, "comment": "Nice", "user_id": guest["id"], "place_id": place["id"]}
    )
    assert write.average_rating == 4.0
    assert write.stale is False
    assert facade.get_place(place["id"])["average_rating"] == 4.0

    with pytest.raises(ConflictError):
        facade.create_review(
            {"rating": 5, "comment": "Again", "user_id": guest["id"], "place_id": place["id"]}
        )

    summary = facade.delete_place(place["id"])
    assert summary["deleted_reviews"] == 1
    assert facade.list_reviews() == []


def test_document_mapping_hooks_are_abstract(connection):
    class HalfMappedRepository(MongoRepository):
        ENTITY_NAME = "thing"

        def _to_entity(self, doc):
            return doc

    with pytest.raises(TypeError):
        MongoRepository(connection, "things")
    with pytest.raises(TypeError):
        HalfMappedRepository(connection, "things")
