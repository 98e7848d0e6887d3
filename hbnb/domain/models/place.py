"""
Place Model
===========

Domain record representing a rentable place.
This is a pure domain object with no infrastructure dependencies.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple

from hbnb.utils.datetime_utils import now

# Average rating of a place that has no reviews
EMPTY_AVERAGE_RATING = 0.0


@dataclass(frozen=True)
class Place:
    """
    Place domain record.

    average_rating is derived state: it is set from the reviews by the
    facade's recomputation step and never taken from caller input.
    amenity_ids holds the place side of the place/amenity association;
    its order carries no meaning.
    """
    title: str
    price: float
    latitude: float
    longitude: float
    owner_id: str
    description: str = ""
    amenity_ids: Tuple[str, ...] = ()
    average_rating: float = EMPTY_AVERAGE_RATING
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())
    version: int = 1

    def has_amenity(self, amenity_id: str) -> bool:
        """Check if the amenity is linked to this place."""
        return amenity_id in self.amenity_ids
