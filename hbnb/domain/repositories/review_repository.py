"""
Review Repository Interface
===========================

Abstract interface for review data access.
"""
from abc import abstractmethod
from typing import List, Optional

from hbnb.domain.models.review import Review
from hbnb.domain.repositories.base_repository import Repository


class ReviewRepository(Repository[Review]):
    """Abstract repository for review persistence operations."""

    @abstractmethod
    def find_by_place(self, place_id: str) -> List[Review]:
        """
        Find all reviews of a place.

        Args:
            place_id: Place identifier

        Returns:
            List of review entities in insertion order
        """
        pass

    @abstractmethod
    def find_by_user(self, user_id: str) -> List[Review]:
        """
        Find all reviews written by a user.

        Args:
            user_id: User identifier

        Returns:
            List of review entities in insertion order
        """
        pass

    @abstractmethod
    def find_by_user_and_place(self, user_id: str, place_id: str) -> Optional[Review]:
        """
        Find the review a user wrote for a place.

        Returns:
            Review entity if found, None otherwise
        """
        pass
