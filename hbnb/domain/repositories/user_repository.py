"""
User Repository Interface
=========================

Abstract interface for user data access.
"""
from abc import abstractmethod
from typing import Optional

from hbnb.domain.models.user import User
from hbnb.domain.repositories.base_repository import Repository


class UserRepository(Repository[User]):
    """Abstract repository for user persistence operations."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """
        Find a user by email, ignoring case.

        Args:
            email: Email address

        Returns:
            User entity if found, None otherwise
        """
        pass
