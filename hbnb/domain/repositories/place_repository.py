"""
Place Repository Interface
==========================

Abstract interface for place data access.
"""
from abc import abstractmethod
from typing import List

from hbnb.domain.models.place import Place
from hbnb.domain.repositories.base_repository import Repository


class PlaceRepository(Repository[Place]):
    """Abstract repository for place persistence operations."""

    @abstractmethod
    def find_by_owner(self, owner_id: str) -> List[Place]:
        """
        Find all places owned by a user.

        Args:
            owner_id: User identifier

        Returns:
            List of place entities in insertion order
        """
        pass

    @abstractmethod
    def find_by_amenity(self, amenity_id: str) -> List[Place]:
        """
        Find all places linked to an amenity.

        Args:
            amenity_id: Amenity identifier

        Returns:
            List of place entities in insertion order
        """
        pass
