"""Password authentication domain service."""

from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from inkwell.domain.error import AuthenticationError, ConflictError, ValidationError
from inkwell.domain.model import User
from inkwell.domain.model.common import utcnow
from inkwell.domain.value import UserId, Username
from inkwell.util.password import hash_password, verify_password

from .user_service import UserService

PASSWORD_MIN_LENGTH = 8

INVALID_CREDENTIALS = "Invalid credentials. Please check your login details."
IDENTITY_TAKEN = "Username or Email is already in use. Please try another."


class AuthService:
    """Registers accounts and checks passwords."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize auth service.

        Args:
            user_service: User service for account lookups and saves
        """
        self.user_service = user_service

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> User:
        """Create an account with a hashed password.

        Raises:
            ValidationError: If the username or password is malformed
            ConflictError: If the username or email is already taken
        """
        with logfire.span("auth_service.register", username=username):
            try:
                username_value = Username(username.strip())
            except PydanticValidationError:
                raise ValidationError(
                    "Username must be 3-30 characters of letters, digits, "
                    "'_', '.' or '-'."
                ) from None
            if len(password) < PASSWORD_MIN_LENGTH:
                raise ValidationError(
                    f"Password must be at least {PASSWORD_MIN_LENGTH} characters."
                )

            email = email.strip().lower()
            if (
                await self.user_service.get_user_by_username(username_value)
                or await self.user_service.get_user_by_email(email)
            ):
                logfire.warn("Registration conflict", username=username, email=email)
                raise ConflictError(IDENTITY_TAKEN)

            now = utcnow()
            user = User(
                id=UserId(uuid4()),
                username=username_value,
                email=email,
                password_hash=hash_password(password),
                first_name=first_name,
                last_name=last_name,
                created_at=now,
                updated_at=now,
            )
            try:
                saved = await self.user_service.save(user)
            except IntegrityError:
                logfire.warn(
                    "Registration conflict on save", username=username, email=email
                )
                raise ConflictError(IDENTITY_TAKEN)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, identifier: str, password: str) -> User:
        """Resolve a username or email and check the password.

        Raises:
            AuthenticationError: If no account matches or the password is wrong
        """
        identifier = identifier.strip()
        with logfire.span("auth_service.authenticate", identifier=identifier):
            if "@" in identifier:
                user = await self.user_service.get_user_by_email(identifier)
            else:
                try:
                    user = await self.user_service.get_user_by_username(
                        Username(identifier)
                    )
                except PydanticValidationError:
                    user = None

            if user is None or not verify_password(password, user.password_hash):
                logfire.warn("Login failed", identifier=identifier)
                raise AuthenticationError(INVALID_CREDENTIALS)

            logfire.info("User authenticated", user_id=str(user.id))
            return user
