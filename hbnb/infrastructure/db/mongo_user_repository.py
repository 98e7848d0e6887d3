"""
MongoDB User Repository
=======================

Concrete implementation of UserRepository using MongoDB.
"""
from typing import Optional

from hbnb.domain.constants.user_fields import UserFields
from hbnb.domain.models.user import User
from hbnb.domain.repositories.user_repository import UserRepository
from hbnb.infrastructure.db.mongo_connection import MongoConnection
from hbnb.infrastructure.db.mongo_repository import MongoRepository, translate_errors
from hbnb.utils.datetime_utils import ensure_aware


class MongoUserRepository(MongoRepository[User], UserRepository):
    """
    MongoDB implementation of UserRepository.

    Emails are stored lower-cased, so case-insensitive lookups are plain
    equality queries on a unique index.
    """

    ENTITY_NAME = "user"
    UPDATABLE_FIELDS = frozenset(
        {UserFields.EMAIL, UserFields.PASSWORD_HASH, UserFields.FIRST_NAME, UserFields.LAST_NAME, UserFields.UPDATED_AT}
    )

    def __init__(self, connection: MongoConnection, collection_name: str = "users"):
        super().__init__(connection, collection_name)
        with translate_errors("create_index"):
            self._collection.create_index(UserFields.EMAIL, unique=True)

    def _to_entity(self, doc: dict) -> User:
        """Convert MongoDB document to User entity."""
        return User(
            id=doc[UserFields.ID],
            email=doc[UserFields.EMAIL],
            password_hash=doc[UserFields.PASSWORD_HASH],
            first_name=doc[UserFields.FIRST_NAME],
            last_name=doc[UserFields.LAST_NAME],
            created_at=ensure_aware(doc[UserFields.CREATED_AT]),
            updated_at=ensure_aware(doc[UserFields.UPDATED_AT]),
            version=doc.get(UserFields.VERSION, 1),
        )

    def _to_document(self, user: User) -> dict:
        """Convert User entity to MongoDB document."""
        return {
            UserFields.ID: user.id,
            UserFields.EMAIL: user.email.lower(),
            UserFields.PASSWORD_HASH: user.password_hash,
            UserFields.FIRST_NAME: user.first_name,
            UserFields.LAST_NAME: user.last_name,
            UserFields.CREATED_AT: user.created_at,
            UserFields.UPDATED_AT: user.updated_at,
            UserFields.VERSION: user.version,
        }

    def _encode_changes(self, partial):
        changes = dict(partial)
        if UserFields.EMAIL in changes:
            changes[UserFields.EMAIL] = changes[UserFields.EMAIL].lower()
        return changes

    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""
        return self._find_one({UserFields.EMAIL: email.strip().lower()})
