"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import UserId, Username


class User(DomainModel):
    """Registered account.

    ``username`` and ``email`` are both unique. The password is only ever
    stored as an Argon2id hash.
    """

    id: UserId
    username: Username
    email: str
    password_hash: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
