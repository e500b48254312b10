"""Public user data returned by the auth use cases."""

from datetime import datetime

from pydantic import BaseModel

from inkwell.domain.model import User


class UserData(BaseModel):
    """A user as shown to clients. Never includes the password hash."""

    id: str
    username: str
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserData":
        return cls(
            id=str(user.id),
            username=str(user.username),
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=user.created_at,
        )


class AuthResponse(BaseModel):
    """Bearer token plus the authenticated user."""

    token: str
    user: UserData
