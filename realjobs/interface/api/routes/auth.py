"""Authentication routes.

Sign-in happens at the external auth provider; this API only reads the
token it issues.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from realjobs.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from realjobs.interface.api.auth import get_auth_token

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Returns the current user if authenticated, or indicates the
    unauthenticated state without raising an error.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> AuthStatusResponse:
    """Get the authenticated user, if any.

    Args:
        get_current_user_use_case: Get current user use case from DI
        token: JWT from cookie or bearer header

    Returns:
        Authentication status and the user's identity
    """
    user = await get_current_user_use_case.execute(GetCurrentUserRequest(token=token))
    return AuthStatusResponse(authenticated=user is not None, user=user)
