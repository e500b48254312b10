"""Bearer credential extraction for protected routes."""

from inkwell.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    UserData,
)
from inkwell.domain.error import AuthenticationError

BEARER_PREFIX = "bearer "


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX) :].strip()
    return token or None


async def require_user(
    authorization: str | None, get_current_user: GetCurrentUserUseCase
) -> UserData:
    """Resolve the caller from the Authorization header.

    Raises:
        AuthenticationError: If the header is missing, the token is invalid or
            expired, or its user no longer exists
    """
    token = bearer_token(authorization)
    if token is None:
        raise AuthenticationError("No token, authorization denied")
    return await get_current_user.execute(GetCurrentUserRequest(token=token))
