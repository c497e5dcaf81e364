"""User account routes: registration, login and the current user."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from conduit.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginUserRequest,
    LoginUserResponse,
    LoginUserUseCase,
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
    UpdateCurrentUserRequest,
    UpdateCurrentUserResponse,
    UpdateCurrentUserUseCase,
)
from conduit.application.usecase.base import CamelModel
from conduit.domain.service import IdentityResolver

router = APIRouter(tags=["users"], route_class=DishkaRoute)


class RegisterAPIRequest(CamelModel):
    """API request for registration."""

    user: RegisterUserRequest


class LoginAPIRequest(CamelModel):
    """API request for login."""

    user: LoginUserRequest


class UpdateUserFields(CamelModel):
    """Fields of the current user that can be changed."""

    username: str | None = None
    email: str | None = None
    password: str | None = None
    bio: str | None = None
    image: str | None = None


class UpdateUserAPIRequest(CamelModel):
    """API request for updating the current user."""

    user: UpdateUserFields


@router.post("/users", response_model=RegisterUserResponse)
async def register(
    request: RegisterAPIRequest,
    register_user_use_case: FromDishka[RegisterUserUseCase],
) -> RegisterUserResponse:
    """Register a new account.

    Args:
        request: Username, email and password
        register_user_use_case: Register use case from DI

    Returns:
        The new user with a token
    """
    return await register_user_use_case.execute(request.user)


@router.post("/users/login", response_model=LoginUserResponse)
async def login(
    request: LoginAPIRequest,
    login_user_use_case: FromDishka[LoginUserUseCase],
) -> LoginUserResponse:
    """Exchange email and password for a token.

    Args:
        request: Email and password
        login_user_use_case: Login use case from DI

    Returns:
        The user with a token
    """
    return await login_user_use_case.execute(request.user)


@router.get("/user", response_model=GetCurrentUserResponse)
async def get_current_user(
    identity_resolver: FromDishka[IdentityResolver],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> GetCurrentUserResponse:
    """Get the authenticated user.

    Requires authentication.
    """
    identity = identity_resolver.require(authorization)
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=identity.id)
    )


@router.put("/user", response_model=UpdateCurrentUserResponse)
async def update_current_user(
    request: UpdateUserAPIRequest,
    identity_resolver: FromDishka[IdentityResolver],
    update_current_user_use_case: FromDishka[UpdateCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> UpdateCurrentUserResponse:
    """Update the authenticated user.

    Requires authentication. Omitted fields are left unchanged.
    """
    identity = identity_resolver.require(authorization)
    return await update_current_user_use_case.execute(
        UpdateCurrentUserRequest(
            user_id=identity.id, **request.user.model_dump(exclude_unset=True)
        )
    )
