"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.error import AuthenticationError, NotFoundError
from inkwell.domain.service import JWTService, UserService
from inkwell.domain.value import UserId

from ..base import BaseUseCase
from .user_data import UserData


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # Bearer token


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for resolving a bearer token to its user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserData:
        """Execute get current user flow.

        Steps:
        1. Verify the token
        2. Load the user named by the token

        Raises:
            AuthenticationError: If the token is invalid or expired, or its user
                no longer exists
        """
        payload = self.jwt_service.verify_token(request.token)
        try:
            user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))
        except (ValueError, NotFoundError):
            raise AuthenticationError("Token is not valid") from None
        return UserData.from_user(user)
