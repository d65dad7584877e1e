"""Production container assembly and FastAPI wiring."""

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from realjobs.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Every mockable component resolves to its production implementation:
    Postgres repositories and the OpenAI classifier. Settings come from
    the environment when first requested.
    """
    providers = [get_provider(base, use_mock=False) for base in PROVIDERS]
    logfire.debug(
        "Building container", providers=[provider.__name__ for provider in providers]
    )
    return make_async_container(
        *(provider() for provider in providers), FastapiProvider()
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app; it is closed on shutdown."""
    setup_dishka(container, app)
