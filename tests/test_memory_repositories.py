"""Tests for the in-memory repository implementations."""
import types

import pytest

from hbnb.domain.exceptions import ConcurrencyError, NotFoundError, PersistenceError
from hbnb.domain.models import Amenity, Place, User
from hbnb.infrastructure.db.memory_database import InMemoryDatabase
from hbnb.infrastructure.db.memory_repositories import (
    InMemoryAmenityRepository,
    InMemoryPlaceRepository,
    InMemoryUserRepository,
)


@pytest.fixture
def database():
    return InMemoryDatabase()


@pytest.fixture
def users(database):
    return InMemoryUserRepository(database)


@pytest.fixture
def places(database):
    return InMemoryPlaceRepository(database)


def _user(email="ada@example.com"):
    return User(email=email, password_hash="hash", first_name="Ada", last_name="Lovelace")


def _place(owner_id="u1", **fields):
    return Place(title="Loft", price=50.0, latitude=1.0, longitude=2.0, owner_id=owner_id, **fields)


def test_save_and_find_by_id(users):
    user = users.save(_user())
    assert users.find_by_id(user.id) == user
    assert users.find_by_id("missing") is None


def test_saving_an_existing_id_fails(users):
    user = users.save(_user())
    with pytest.raises(PersistenceError):
        users.save(user)


def test_update_bumps_version_and_timestamp(users):
    user = users.save(_user())
    updated = users.update(user.id, {"first_name": "Augusta"})

    assert updated.first_name == "Augusta"
    assert updated.version == user.version + 1
    assert updated.updated_at >= user.updated_at
    assert updated.created_at == user.created_at
    assert users.find_by_id(user.id) == updated


def test_update_with_stale_version_is_rejected(users):
    user = users.save(_user())
    users.update(user.id, {"first_name": "Augusta"}, expected_version=user.version)

    with pytest.raises(ConcurrencyError):
        users.update(user.id, {"first_name": "Ada"}, expected_version=user.version)
    assert users.find_by_id(user.id).first_name == "Augusta"


def test_update_of_missing_entity(users):
    with pytest.raises(NotFoundError):
        users.update("missing", {"first_name": "x"})


@pytest.mark.parametrize("field", ["id", "version", "created_at", "nickname"])
def test_update_refuses_protected_or_unknown_fields(users, field):
    user = users.save(_user())
    with pytest.raises(PersistenceError):
        users.update(user.id, {field: "x"})


def test_delete(users):
    user = users.save(_user())
    users.delete(user.id)
    assert users.find_by_id(user.id) is None
    with pytest.raises(NotFoundError):
        users.delete(user.id)


def test_find_all_is_lazy_and_in_insertion_order(users):
    saved = [users.save(_user(f"user{i}@example.com")) for i in range(3)]
    result = users.find_all()

    assert isinstance(result, types.GeneratorType)
    assert [user.id for user in result] == [user.id for user in saved]


def test_find_all_iterates_over_a_snapshot(users):
    users.save(_user("a@example.com"))
    iterator = users.find_all()
    first = next(iterator)
    users.save(_user("b@example.com"))

    assert list(iterator) == []
    assert first.email == "a@example.com"


def test_find_by_email_ignores_case(users):
    user = users.save(_user("ada@example.com"))
    assert users.find_by_email(" ADA@Example.com ") == user
    assert users.find_by_email("grace@example.com") is None


def test_place_finders(places):
    first = places.save(_place(owner_id="u1", amenity_ids=("wifi",)))
    places.save(_place(owner_id="u2"))

    assert places.find_by_owner("u1") == [first]
    assert places.find_by_amenity("wifi") == [first]
    assert places.find_by_amenity("pool") == []


def test_find_by_name_ignores_case(database):
    amenities = InMemoryAmenityRepository(database)
    wifi = amenities.save(Amenity(name="WiFi"))
    assert amenities.find_by_name("wifi") == wifi


def test_databases_are_isolated():
    first = InMemoryUserRepository(InMemoryDatabase())
    second = InMemoryUserRepository(InMemoryDatabase())
    user = first.save(_user())
    assert second.find_by_id(user.id) is None


def test_repositories_on_one_database_share_tables(database):
    user = InMemoryUserRepository(database).save(_user())
    assert InMemoryUserRepository(database).find_by_id(user.id) == user
    repository = InMemoryUserRepository(database)
    database.clear()
    assert repository.find_by_id(user.id) is None
