"""User domain service."""

import logfire

from inkwell.domain.error import NotFoundError
from inkwell.domain.model import User
from inkwell.domain.repository import UserRepository
from inkwell.domain.value import UserId, Username


class UserService:
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id), username=str(user.username))
            return user

    async def get_user_by_username(self, username: Username) -> User | None:
        """Get user by username.

        Args:
            username: Username

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_username", username=str(username)):
            user = await self.user_repository.find_by_username(username)
            if user:
                logfire.info("User found", username=str(username), user_id=str(user.id))
            else:
                logfire.warn("User not found", username=str(username))
            return user

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email.

        Args:
            email: User email, matched case-insensitively

        Returns:
            User if found, None otherwise
        """
        email = email.strip().lower()
        with logfire.span("user_service.get_user_by_email", email=email):
            user = await self.user_repository.find_by_email(email)
            if user:
                logfire.info("User found", email=email, user_id=str(user.id))
            else:
                logfire.warn("User not found", email=email)
            return user

    async def save(self, user: User) -> User:
        """Save user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span(
            "user_service.save", user_id=str(user.id), username=str(user.username)
        ):
            saved = await self.user_repository.save(user)
            logfire.info(
                "User saved", user_id=str(saved.id), username=str(saved.username)
            )
            return saved
