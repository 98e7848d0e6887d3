from .aggregate_guard import (
    AggregateGuard,
    ReadWriteLock,
    amenity_key,
    place_key,
    unique_key,
    user_key,
)

__all__ = [
    "AggregateGuard",
    "ReadWriteLock",
    "amenity_key",
    "place_key",
    "unique_key",
    "user_key",
]
