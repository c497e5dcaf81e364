"""Profile use cases."""

from .follow_user import (
    FollowUserRequest,
    FollowUserResponse,
    FollowUserUseCase,
    UnfollowUserUseCase,
)
from .get_profile import GetProfileRequest, GetProfileResponse, GetProfileUseCase

__all__ = [
    "FollowUserRequest",
    "FollowUserResponse",
    "FollowUserUseCase",
    "GetProfileRequest",
    "GetProfileResponse",
    "GetProfileUseCase",
    "UnfollowUserUseCase",
]
