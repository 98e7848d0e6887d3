"""
Amenity Repository Interface
============================

Abstract interface for amenity data access.
"""
from abc import abstractmethod
from typing import Optional

from hbnb.domain.models.amenity import Amenity
from hbnb.domain.repositories.base_repository import Repository


class AmenityRepository(Repository[Amenity]):
    """Abstract repository for amenity persistence operations."""

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Amenity]:
        """
        Find an amenity by name, ignoring case.

        Returns:
            Amenity entity if found, None otherwise
        """
        pass
