"""
Amenity Model
=============

Domain record representing an amenity (Wi-Fi, parking, ...) that places
can offer.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime

from hbnb.utils.datetime_utils import now


@dataclass(frozen=True)
class Amenity:
    """Amenity domain record. Names are unique regardless of case."""
    name: str
    description: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())
    version: int = 1
