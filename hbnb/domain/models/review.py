"""
Review Model
============

Domain record representing a user's review of a place.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime

from hbnb.utils.datetime_utils import now


@dataclass(frozen=True)
class Review:
    """Review domain record. user_id and place_id never change once created."""
    rating: int
    comment: str
    user_id: str
    place_id: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())
    version: int = 1
