"""Shared helpers for action routes."""

from fastapi.responses import JSONResponse

from overflow.application.action import ActionResponse
from overflow.domain.service import JWTService


def resolve_caller(jwt_service: JWTService, auth_token: str | None) -> str | None:
    """User ID from the ``auth_token`` cookie, or None when absent or invalid.

    Whether a caller is required is decided by the action, not here.
    """
    return jwt_service.get_user_id_from_token(auth_token)


def envelope(result: ActionResponse) -> JSONResponse:
    """Render an action result with its status code."""
    return JSONResponse(status_code=result.status, content=result.to_body())
