"""Tests for amenity operations on the facade."""
import pytest

from hbnb.domain.exceptions import ConflictError, NotFoundError, ValidationError


def test_create_and_get_amenity(facade):
    amenity = facade.create_amenity({"name": " WiFi ", "description": "Fibre"})

    assert amenity["name"] == "WiFi"
    assert amenity["description"] == "Fibre"
    assert facade.get_amenity(amenity["id"]) == amenity
    assert facade.list_amenities() == [amenity]


def test_amenity_names_are_unique_ignoring_case(facade):
    facade.create_amenity({"name": "WiFi"})
    with pytest.raises(ConflictError) as exc:
        facade.create_amenity({"name": "wifi"})
    assert exc.value.field == "name"


@pytest.mark.parametrize(
    "data, field",
    [({"name": ""}, "name"), ({"name": "x" * 51}, "name"), ({}, "name"), ({"name": "Pool", "price": 3}, "price")],
)
def test_invalid_amenities(facade, data, field):
    with pytest.raises(ValidationError) as exc:
        facade.create_amenity(data)
    assert exc.value.field == field
    assert facade.list_amenities() == []


def test_rename_amenity(facade):
    wifi = facade.create_amenity({"name": "WiFi"})
    pool = facade.create_amenity({"name": "Pool"})

    assert facade.update_amenity(wifi["id"], {"name": "WIFI"})["name"] == "WIFI"
    with pytest.raises(ConflictError):
        facade.update_amenity(pool["id"], {"name": "wifi"})
    assert facade.get_amenity(pool["id"])["name"] == "Pool"


def test_unknown_amenity(facade):
    with pytest.raises(NotFoundError):
        facade.get_amenity("missing")
    with pytest.raises(NotFoundError):
        facade.update_amenity("missing", {"name": "x"})
    with pytest.raises(NotFoundError):
        facade.delete_amenity("missing")


def test_delete_amenity_unlinks_it_everywhere(facade, make_user, make_place):
    owner = make_user()
    wifi = facade.create_amenity({"name": "WiFi"})
    pool = facade.create_amenity({"name": "Pool"})
    first = make_place(owner["id"], amenity_ids=[wifi["id"], pool["id"]])
    second = make_place(owner["id"], amenity_ids=[wifi["id"]])
    bare = make_place(owner["id"])

    summary = facade.delete_amenity(wifi["id"])

    assert summary == {"id": wifi["id"], "unlinked_places": 2}
    assert facade.get_place(first["id"])["amenity_ids"] == [pool["id"]]
    assert facade.get_place(second["id"])["amenity_ids"] == []
    assert facade.get_place(bare["id"])["amenity_ids"] == []
    with pytest.raises(NotFoundError):
        facade.get_amenity(wifi["id"])
    assert [a["name"] for a in facade.list_place_amenities(first["id"])] == ["Pool"]
