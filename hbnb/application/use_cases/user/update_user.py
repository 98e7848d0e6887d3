"""
Update User Use Case
====================

Business use case for a partial user update.
"""
import logging
from typing import Any, Dict, Mapping

from hbnb.application.concurrency import AggregateGuard, unique_key, user_key
from hbnb.application.dto import UserUpdateRequest, parse_request
from hbnb.domain.constants.user_fields import UserFields
from hbnb.domain.models.user import User
from hbnb.domain.repositories.user_repository import UserRepository
from hbnb.domain.rules import assert_unique_email, assert_user_exists
from hbnb.domain.services.credential_hasher import CredentialHasher
from hbnb.domain.validation import (
    MAX_NAME_LENGTH,
    MIN_PASSWORD_LENGTH,
    validate_email,
    validate_password,
    validate_required_text,
)

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for updating names, email or password of a user."""

    def __init__(
        self,
        user_repository: UserRepository,
        hasher: CredentialHasher,
        guard: AggregateGuard,
        min_password_length: int = MIN_PASSWORD_LENGTH,
    ):
        self._users = user_repository
        self._hasher = hasher
        self._guard = guard
        self._min_password_length = min_password_length

    def _validated_changes(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        sent = parse_request(UserUpdateRequest, data).model_dump(exclude_unset=True)
        changes: Dict[str, Any] = {}
        for name in (UserFields.FIRST_NAME, UserFields.LAST_NAME):
            if name in sent:
                changes[name] = validate_required_text(name, sent[name], MAX_NAME_LENGTH)
        if UserFields.EMAIL in sent:
            changes[UserFields.EMAIL] = validate_email(sent[UserFields.EMAIL])
        if UserFields.PASSWORD in sent:
            password = validate_password(sent[UserFields.PASSWORD], self._min_password_length)
            changes[UserFields.PASSWORD_HASH] = self._hasher.hash(password)
        return changes

    def execute(self, user_id: str, data: Mapping[str, Any]) -> User:
        """
        Execute the update user use case.

        Raises:
            ValidationError: If a sent field is malformed
            NotFoundError: If the user does not exist
            ConflictError: If the new email belongs to another user
        """
        changes = self._validated_changes(data)
        keys = [user_key(user_id)]
        if UserFields.EMAIL in changes:
            keys.append(unique_key(UserFields.EMAIL, changes[UserFields.EMAIL]))

        with self._guard.exclusive(*keys):
            current = assert_user_exists(self._users, user_id, UserFields.ID)
            if not changes:
                return current
            if UserFields.EMAIL in changes:
                assert_unique_email(self._users, changes[UserFields.EMAIL], exclude_id=user_id)
            updated = self._users.update(user_id, changes)

        logger.info(f"User {user_id} updated ({', '.join(sorted(changes))})")
        return updated
