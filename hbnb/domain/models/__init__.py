from .user import User
from .place import Place, EMPTY_AVERAGE_RATING
from .review import Review
from .amenity import Amenity

__all__ = [
    "User",
    "Place",
    "EMPTY_AVERAGE_RATING",
    "Review",
    "Amenity",
]
