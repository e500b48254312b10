"""User account routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from fastapi.responses import JSONResponse

from inkwell.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from inkwell.interface.api.auth import require_user
from inkwell.interface.api.response import success

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.post("/register")
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> JSONResponse:
    """Create an account and return a bearer token for it.

    Example:
        POST /users/register
        {"username": "alice", "email": "alice@example.com", "password": "...",
         "firstName": "Alice"}
    """
    response = await register_use_case.execute(request)
    return success(
        "Registration successful! Welcome aboard.",
        response,
        status_code=status.HTTP_201_CREATED,
    )


@router.post("/login")
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> JSONResponse:
    """Exchange a username or email and password for a bearer token."""
    response = await login_use_case.execute(request)
    return success("Login successful. Welcome back!", response)


@router.get("/profile")
async def profile(
    get_current_user: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Get the authenticated caller's profile."""
    user = await require_user(authorization, get_current_user)
    return success("Profile fetched successfully.", user)
