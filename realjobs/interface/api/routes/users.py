"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from realjobs.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)
from realjobs.domain.error import DomainError
from realjobs.domain.service import AuthService
from realjobs.interface.api.auth import current_user_fields, get_auth_token
from realjobs.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for editing the current user's profile."""

    username: str | None = Field(default=None, min_length=3, max_length=30)
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = Field(default=None, max_length=2048)


@router.patch("/me", response_model=UpdateUserProfileResponse)
async def update_my_profile(
    request: UpdateUserProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    auth_service: FromDishka[AuthService],
    token: str | None = Depends(get_auth_token),
) -> UpdateUserProfileResponse:
    """Edit the current user's username, bio or avatar.

    Omitted fields are unchanged. An empty bio or avatar URL clears it.

    Example:
        PATCH /users/me
        {"username": "alice", "bio": "Hiring for platform teams"}

    Raises:
        HTTPException: If not authenticated, a field is invalid or the
            username is taken
    """
    try:
        use_case_request = UpdateUserProfileRequest(
            **request.model_dump(), **current_user_fields(auth_service, token)
        )
        return await update_user_profile_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "update profile")


@router.get("/{username}", response_model=GetUserProfileResponse)
async def get_user_profile(
    username: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Public profile with the user's postings and recent comments.

    Raises:
        HTTPException: If no user has this username
    """
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(username=username)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "get profile")
