"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from realjobs.config import Settings
from realjobs.interface.api.routes import (
    auth,
    bookmarks,
    comments,
    health,
    jobs,
    users,
    votes,
)
from realjobs.interface.api.routes.health import API_VERSION
from realjobs.util.di.container import create_container, setup_di
from realjobs.util.observability import instrument_fastapi, instrument_httpx


def allowed_origins(settings: Settings) -> list[str]:
    """Browser origins allowed to call the API with credentials."""
    origins = [settings.api.frontend_url]
    if settings.environment in ("test", "development"):
        origins += ["http://localhost:3000", "http://localhost:5173"]
    return list(dict.fromkeys(origins))


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the FastAPI application.

    Logfire must already be configured: ``scripts/start_app.py`` does it in
    production and ``tests/conftest.py`` under pytest.

    Args:
        container: DI container to use instead of the production one
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Real Job Postings API",
        description=(
            "Community-verified job listings: trust scores from votes, "
            "ranked feeds, threaded discussion and sentiment moderation"
        ),
        version=API_VERSION,
    )
    instrument_fastapi(app_instance)

    # Auth travels in a cookie, so credentials must be allowed
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins(settings),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Cache-Control"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    for router in (
        health.router,
        auth.router,
        jobs.router,
        comments.router,
        votes.router,
        bookmarks.router,
        users.router,
    ):
        app_instance.include_router(router)

    return app_instance


# Imported by uvicorn; the container connects lazily on first request
app = create_app()
