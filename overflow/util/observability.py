"""Logfire setup and library instrumentation.

Application code calls logfire directly:

    import logfire

    with logfire.span("tag_service.resolve", tag_name=name.root):
        tag = await self.tag_repository.upsert_increment(name)
        logfire.info("Tag resolved", tag_id=str(tag.id))

``configure_logfire`` must run before the app is created so that the
instrumentation hooks below attach to a configured instance.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from overflow.config import Settings

SERVICE_NAME = "overflow-api"
SERVICE_VERSION = "0.1.0"


def _should_send(settings: Settings) -> bool:
    # Explicit setting wins, otherwise send whenever a token is configured
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current environment.

    Without a token (and without ``OBSERVABILITY__SEND_TO_LOGFIRE=true``)
    spans and logs only go to the console.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    config_kwargs: dict[str, Any] = {
        "service_name": SERVICE_NAME,
        "service_version": SERVICE_VERSION,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by ``app``.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,  # Keeps the auth cookie out of traces
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements and transaction boundaries of ``engine``.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")
