"""Logfire setup and instrumentation.

Application code logs with ``logfire`` directly:

    logfire.info("Job vote cast", job_id=job_id, delta=delta)

    with logfire.span("ranking_service.rank_jobs", mode=mode.value):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from realjobs.config import Settings

SERVICE_NAME = "realjobs-backend"

# Polled by the load balancer, and comment streams stay open for minutes
UNTRACED_URLS = r"/health$,/jobs/[^/]+/comments/stream$"


def should_send(settings: Settings) -> bool:
    """Whether telemetry leaves the process.

    An explicit ``OBSERVABILITY__SEND_TO_LOGFIRE`` wins; otherwise a token
    turns sending on.
    """
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        sentiment_enabled=bool(settings.sentiment.api_key),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP requests, skipping health checks and comment streams.

    Headers are not captured: requests carry bearer tokens and auth cookies.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries on the engine, tagging SQL with span context."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound HTTP, which is the sentiment classifier."""
    logfire.instrument_httpx()
