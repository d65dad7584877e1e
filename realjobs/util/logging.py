"""Route stdlib logging from third-party libraries into Logfire.

Application code logs through ``logfire`` directly. uvicorn, alembic and
SQLAlchemy use the standard ``logging`` module, so their records are
forwarded with ``LogfireLoggingHandler`` at a level set per environment.
"""

import logging

import logfire

from realjobs.config import Settings

# Library loggers and the level they are held at outside debug mode
_LIBRARY_LEVELS: dict[str, int] = {
    "uvicorn": logging.INFO,
    "uvicorn.access": logging.WARNING,
    "alembic": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "asyncpg": logging.WARNING,
}


def log_level(settings: Settings) -> int:
    """Root level for the environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Send stdlib log records to Logfire.

    Call after ``configure_logfire``.

    Args:
        settings: Application settings
    """
    level = log_level(settings)

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Replace handlers installed by earlier imports
    )

    for name, library_level in _LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(logging.DEBUG if settings.debug else library_level)

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
