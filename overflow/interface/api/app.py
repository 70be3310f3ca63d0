"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from overflow.config import Settings
from overflow.interface.api.routes import health, questions, tags
from overflow.util.di.container import create_container, setup_di
from overflow.util.observability import SERVICE_VERSION, instrument_fastapi


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    does so in production and serves this as a uvicorn app factory.

    Args:
        settings: Settings for middleware setup; loaded from the environment
            when omitted
        container: DI container; the production container when omitted
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Overflow API",
        description="Questions, tags and the associations between them",
        version=SERVICE_VERSION,
    )

    instrument_fastapi(app_instance)

    # The auth cookie is sent cross-origin, so origins must be explicit
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(tags.router)

    return app_instance
