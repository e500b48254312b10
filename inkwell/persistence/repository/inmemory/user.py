"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from inkwell.domain.model.user import User
from inkwell.domain.repository.user import UserRepository
from inkwell.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user.

        Raises:
            IntegrityError: If another user has the same username or email
        """
        for other in self._users.values():
            if other.id != user.id and (
                other.username == user.username or other.email == user.email
            ):
                raise IntegrityError("Duplicate username or email", None, Exception())
        self._users[user.id] = user
        return user
