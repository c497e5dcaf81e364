"""Authentication and account use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .login_user import LoginUserRequest, LoginUserResponse, LoginUserUseCase
from .register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)
from .update_current_user import (
    UpdateCurrentUserRequest,
    UpdateCurrentUserResponse,
    UpdateCurrentUserUseCase,
)

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "LoginUserRequest",
    "LoginUserResponse",
    "LoginUserUseCase",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
    "UpdateCurrentUserRequest",
    "UpdateCurrentUserResponse",
    "UpdateCurrentUserUseCase",
]
