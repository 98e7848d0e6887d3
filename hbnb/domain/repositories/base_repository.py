"""
Base Repository Interface
=========================

Operations shared by every entity repository.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterator, Mapping, Optional, TypeVar

EntityType = TypeVar("EntityType")


class Repository(ABC, Generic[EntityType]):
    """
    Abstract CRUD contract.

    Each operation is individually atomic and reads reflect earlier writes
    made through the same repository. Store failures surface as
    PersistenceError.
    """

    @abstractmethod
    def save(self, entity: EntityType) -> EntityType:
        """
        Persist a new entity.

        Args:
            entity: Entity to store

        Returns:
            Stored entity

        Raises:
            PersistenceError: If the id is already taken or the store fails
        """
        pass

    @abstractmethod
    def find_by_id(self, entity_id: str) -> Optional[EntityType]:
        """
        Find an entity by its ID.

        Args:
            entity_id: Unique identifier

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    def update(
        self,
        entity_id: str,
        partial: Mapping[str, Any],
        expected_version: Optional[int] = None,
    ) -> EntityType:
        """
        Apply a partial update and bump the entity version.

        Args:
            entity_id: Unique identifier
            partial: Field name to new value
            expected_version: When given, the update only applies if the
                stored version still matches

        Returns:
            Updated entity

        Raises:
            NotFoundError: If no entity has this ID
            ConcurrencyError: If expected_version no longer matches
        """
        pass

    @abstractmethod
    def delete(self, entity_id: str) -> None:
        """
        Delete an entity.

        Raises:
            NotFoundError: If no entity has this ID
        """
        pass

    @abstractmethod
    def find_all(self) -> Iterator[EntityType]:
        """
        Iterate over all entities in insertion order.

        Returns:
            Lazy iterator of entities
        """
        pass
