"""JWT token domain service."""

import logfire

from inkwell.config import AuthSettings
from inkwell.domain.error import AuthenticationError
from inkwell.domain.model import User
from inkwell.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create JWT token for user.

        Args:
            user: Authenticated user

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user.id)):
            token = create_token(str(user.id), str(user.username), self.auth_settings)
            logfire.info(
                "JWT token created", user_id=str(user.id), username=str(user.username)
            )
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise AuthenticationError("Invalid or expired token") from e
            logfire.info("JWT token verified", user_id=payload.user_id)
            return payload
