"""Register use case."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from inkwell.domain.service import AuthService, JWTService

from ..base import BaseUseCase
from .user_data import AuthResponse, UserData


class RegisterRequest(BaseModel):
    """Register request. Accepts camelCase or snake_case name fields."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    email: EmailStr
    password: str
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account and signing the new user in."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Password authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute register flow.

        Raises:
            ValidationError: If the username or password is malformed
            ConflictError: If the username or email is taken
        """
        user = await self.auth_service.register(
            username=request.username,
            email=str(request.email),
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
        )
        return AuthResponse(
            token=self.jwt_service.create_token(user),
            user=UserData.from_user(user),
        )
