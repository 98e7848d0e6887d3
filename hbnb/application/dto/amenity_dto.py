"""
Amenity DTO
===========

Pydantic models for amenity requests and responses.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict

from hbnb.domain.models.amenity import Amenity
from hbnb.utils.datetime_utils import to_iso


class AmenityCreateRequest(BaseModel):
    """DTO for creating an amenity."""
    model_config = ConfigDict(extra="forbid")

    name: str
    description: Optional[str] = None


class AmenityUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    description: Optional[str] = None


class AmenityResponse(BaseModel):
    """DTO for amenity data."""
    id: str
    name: str
    description: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, amenity: Amenity) -> "AmenityResponse":
        return cls(
            id=amenity.id,
            name=amenity.name,
            description=amenity.description,
            created_at=to_iso(amenity.created_at),
            updated_at=to_iso(amenity.updated_at),
        )
