import pytest

from hbnb.core.config import Settings
from hbnb.di import build_facade


def make_settings(**overrides) -> Settings:
    values = {
        "storage_backend": "memory",
        # Cheap hashes keep the suite fast
        "password_hash_method": "pbkdf2:sha256:1000",
        "allow_self_review": False,
        "guard_timeout_seconds": 5.0,
        "rating_recompute_attempts": 3,
        "rating_precision": 2,
        "min_password_length": 8,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def facade(settings):
    return build_facade(settings)


@pytest.fixture
def make_user(facade):
    counter = {"n": 0}

    def _make(email=None, password="s3cret-pass", first_name="Ada", last_name="Lovelace"):
        counter["n"] += 1
        return facade.create_user(
            {
                "email": email or f"user{counter['n']}@example.com",
                "password": password,
                "first_name": first_name,
                "last_name": last_name,
            }
        )

    return _make


@pytest.fixture
def make_place(facade):
    def _make(owner_id, **fields):
        data = {
            "title": "Sea view loft",
            "description": "Two rooms by the harbour",
            "price": 100,
            "latitude": 43.3,
            "longitude": 5.37,
            "owner_id": owner_id,
        }
        data.update(fields)
        return facade.create_place(data)

    return _make


@pytest.fixture
def make_review(facade):
    def _make(user_id, place_id, rating=5, comment="Lovely stay"):
        return facade.create_review(
            {"rating": rating, "comment": comment, "user_id": user_id, "place_id": place_id}
        )

    return _make
