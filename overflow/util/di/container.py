"""Production container assembly."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from overflow.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container backed by PostgreSQL, with every component in its production variant."""
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Let DishkaRoute handlers of ``app`` resolve dependencies from ``container``."""
    setup_dishka(container, app)
