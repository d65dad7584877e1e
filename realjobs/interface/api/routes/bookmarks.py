"""Bookmark routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from realjobs.application.usecase.bookmark import (
    ListBookmarksRequest,
    ListBookmarksResponse,
    ListBookmarksUseCase,
    ToggleBookmarkRequest,
    ToggleBookmarkResponse,
    ToggleBookmarkUseCase,
)
from realjobs.domain.error import DomainError
from realjobs.domain.service import AuthService
from realjobs.interface.api.auth import current_user_id, get_auth_token
from realjobs.interface.error import to_http_exception

router = APIRouter(tags=["bookmarks"], route_class=DishkaRoute)


@router.post("/jobs/{job_id}/bookmark", response_model=ToggleBookmarkResponse)
async def toggle_bookmark(
    job_id: str,
    toggle_bookmark_use_case: FromDishka[ToggleBookmarkUseCase],
    auth_service: FromDishka[AuthService],
    token: str | None = Depends(get_auth_token),
) -> ToggleBookmarkResponse:
    """Save a job, or unsave it if already saved.

    Raises:
        HTTPException: If not authenticated or the job is not found
    """
    try:
        request = ToggleBookmarkRequest(
            job_id=job_id, user_id=current_user_id(auth_service, token)
        )
        return await toggle_bookmark_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "toggle bookmark")


@router.get("/bookmarks", response_model=ListBookmarksResponse)
async def list_bookmarks(
    list_bookmarks_use_case: FromDishka[ListBookmarksUseCase],
    auth_service: FromDishka[AuthService],
    token: str | None = Depends(get_auth_token),
) -> ListBookmarksResponse:
    """List the current user's saved jobs, most recently saved first."""
    try:
        request = ListBookmarksRequest(user_id=current_user_id(auth_service, token))
        return await list_bookmarks_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "list bookmarks")
