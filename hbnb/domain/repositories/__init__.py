from .base_repository import Repository
from .user_repository import UserRepository
from .place_repository import PlaceRepository
from .review_repository import ReviewRepository
from .amenity_repository import AmenityRepository

__all__ = [
    "Repository",
    "UserRepository",
    "PlaceRepository",
    "ReviewRepository",
    "AmenityRepository",
]
