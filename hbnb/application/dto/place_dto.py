"""
Place DTO
=========

Pydantic models for place requests and responses. average_rating is
derived, so requests that carry it are rejected as unknown fields.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt

from hbnb.domain.models.place import Place
from hbnb.utils.datetime_utils import to_iso

Number = Union[StrictInt, StrictFloat]


class PlaceCreateRequest(BaseModel):
    """DTO for creating a place."""
    model_config = ConfigDict(extra="forbid")

    title: str
    description: Optional[str] = None
    price: Number
    latitude: Number
    longitude: Number
    owner_id: str
    amenity_ids: List[str] = Field(default_factory=list)


class PlaceUpdateRequest(BaseModel):
    """DTO for a partial place update. Owner and amenities are not changed here."""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Number] = None
    latitude: Optional[Number] = None
    longitude: Optional[Number] = None


class PlaceResponse(BaseModel):
    """DTO for place data."""
    id: str
    title: str
    description: str
    price: float
    latitude: float
    longitude: float
    owner_id: str
    amenity_ids: List[str]
    average_rating: float
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, place: Place) -> "PlaceResponse":
        return cls(
            id=place.id,
            title=place.title,
            description=place.description,
            price=place.price,
            latitude=place.latitude,
            longitude=place.longitude,
            owner_id=place.owner_id,
            amenity_ids=sorted(place.amenity_ids),
            average_rating=place.average_rating,
            created_at=to_iso(place.created_at),
            updated_at=to_iso(place.updated_at),
        )
