"""Login use case."""

from pydantic import BaseModel

from inkwell.domain.service import AuthService, JWTService

from ..base import BaseUseCase
from .user_data import AuthResponse, UserData


class LoginRequest(BaseModel):
    """Login request.

    ``identifier`` is either the username or the email address.
    """

    identifier: str
    password: str


class LoginUseCase(BaseUseCase):
    """Use case for password login."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Password authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Raises:
            AuthenticationError: If the credentials don't match an account
        """
        user = await self.auth_service.authenticate(
            request.identifier, request.password
        )
        return AuthResponse(
            token=self.jwt_service.create_token(user),
            user=UserData.from_user(user),
        )
