"""
User Model
==========

Domain record representing a registered user.
This is a pure domain object with no infrastructure dependencies.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime

from hbnb.utils.datetime_utils import now


@dataclass(frozen=True)
class User:
    """
    User domain record.

    Only the password hash is ever stored; the plaintext password lives in
    the request and is handed straight to the credential hasher.
    """
    email: str
    password_hash: str
    first_name: str
    last_name: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())
    version: int = 1
