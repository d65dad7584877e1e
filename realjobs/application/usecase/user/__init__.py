"""User profile use cases."""

from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    ProfileComment,
)
from .update_user_profile import (
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)

__all__ = [
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "ProfileComment",
    "UpdateUserProfileRequest",
    "UpdateUserProfileResponse",
    "UpdateUserProfileUseCase",
]
