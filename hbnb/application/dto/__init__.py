"""
DTO Package
===========

Request and response shapes exchanged with callers.
"""
from .parsing import parse_request
from .user_dto import UserCreateRequest, UserUpdateRequest, UserResponse
from .place_dto import PlaceCreateRequest, PlaceUpdateRequest, PlaceResponse
from .review_dto import ReviewCreateRequest, ReviewUpdateRequest, ReviewResponse, RatedWrite
from .amenity_dto import AmenityCreateRequest, AmenityUpdateRequest, AmenityResponse

__all__ = [
    "parse_request",
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserResponse",
    "PlaceCreateRequest",
    "PlaceUpdateRequest",
    "PlaceResponse",
    "ReviewCreateRequest",
    "ReviewUpdateRequest",
    "ReviewResponse",
    "RatedWrite",
    "AmenityCreateRequest",
    "AmenityUpdateRequest",
    "AmenityResponse",
]
