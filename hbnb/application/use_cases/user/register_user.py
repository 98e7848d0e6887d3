"""
Register User Use Case
======================

Business use case for registering a new user.
"""
import logging
from dataclasses import replace
from typing import Any, Mapping

from hbnb.application.concurrency import AggregateGuard, unique_key
from hbnb.application.dto import UserCreateRequest, parse_request
from hbnb.domain.constants.user_fields import UserFields
from hbnb.domain.models.user import User
from hbnb.domain.repositories.user_repository import UserRepository
from hbnb.domain.rules import assert_unique_email
from hbnb.domain.services.credential_hasher import CredentialHasher
from hbnb.domain.validation import MIN_PASSWORD_LENGTH, validate_password, validate_user

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """
    Use case for registering a user.

    The password is validated and hashed before the email reservation is
    taken, so the exclusive section only spans the uniqueness check and
    the insert.
    """

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

    def execute(self, data: Mapping[str, Any]) -> User:
        """
        Execute the register user use case.

        Args:
            data: email, password, first_name, last_name

        Returns:
            Registered user entity

        Raises:
            ValidationError: If a field is missing or malformed
            ConflictError: If the email is already registered
        """
        request = parse_request(UserCreateRequest, data)
        validate_password(request.password, self._min_password_length)
        user = validate_user(
            User(
                email=request.email,
                password_hash="",
                first_name=request.first_name,
                last_name=request.last_name,
            )
        )
        user = replace(user, password_hash=self._hasher.hash(request.password))

        with self._guard.exclusive(unique_key(UserFields.EMAIL, user.email)):
            assert_unique_email(self._users, user.email)
            saved = self._users.save(user)

        logger.info(f"User {saved.id} registered")
        return saved
