"""
User DTO
========

Pydantic models for user requests and responses. The response never
carries the password hash.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict

from hbnb.domain.models.user import User
from hbnb.utils.datetime_utils import to_iso


class UserCreateRequest(BaseModel):
    """DTO for registering a user."""
    model_config = ConfigDict(extra="forbid")

    email: str
    password: str
    first_name: str
    last_name: str


class UserUpdateRequest(BaseModel):
    """DTO for a partial user update. Only the fields sent are changed."""
    model_config = ConfigDict(extra="forbid")

    email: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UserResponse(BaseModel):
    """DTO for user data."""
    id: str
    email: str
    first_name: str
    last_name: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=to_iso(user.created_at),
            updated_at=to_iso(user.updated_at),
        )
