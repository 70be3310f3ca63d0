"""Action envelope, request validation and error normalization.

Every use case entry point returns an ``ActionResponse``: either
``{success: true, data}`` or ``{success: false, error: {message, details}}``
together with the HTTP-style status the failure maps to.
"""

from typing import Any, Mapping, Optional, TypeVar

import logfire
import pydantic
from pydantic import BaseModel

from overflow.domain.error import AuthenticationError, DomainError, ValidationError

S = TypeVar("S", bound=BaseModel)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class ActionError(BaseModel):
    """Error payload of a failed action."""

    message: str
    details: Optional[dict[str, list[str]]] = None


class ActionResponse(BaseModel):
    """Uniform result of an action."""

    success: bool
    data: Any = None
    error: Optional[ActionError] = None
    status: int = 200

    @classmethod
    def ok(cls, data: Any, status: int = 200) -> "ActionResponse":
        return cls(success=True, data=data, status=status)

    @classmethod
    def fail(
        cls,
        message: str,
        status: int,
        details: Optional[dict[str, list[str]]] = None,
    ) -> "ActionResponse":
        return cls(
            success=False,
            error=ActionError(message=message, details=details or None),
            status=status,
        )

    def to_body(self) -> dict[str, Any]:
        """JSON-ready envelope body."""
        if self.success:
            return {"success": True, "data": _dump(self.data)}
        return {
            "success": False,
            "error": self.error.model_dump(exclude_none=True) if self.error else {},
        }


def _dump(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    return data


def field_errors(error: pydantic.ValidationError) -> dict[str, list[str]]:
    """Group pydantic error messages by dotted field path."""
    details: dict[str, list[str]] = {}
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"]) or "__root__"
        details.setdefault(field, []).append(item["msg"])
    return details


def validate_action(
    schema: type[S],
    params: Mapping[str, Any],
    caller: Optional[str] = None,
    authorize: bool = False,
) -> S:
    """Validate raw parameters and, optionally, require a caller.

    The caller identity is never read from ``params``; when ``authorize`` is
    set it is injected into the request's ``user_id`` field.

    Args:
        schema: Request model to validate against
        params: Raw input parameters
        caller: Authenticated user ID, if any
        authorize: Whether a caller is required

    Returns:
        Validated request

    Raises:
        ValidationError: If the parameters do not match the schema
        AuthenticationError: If ``authorize`` is set and there is no caller
    """
    data = {key: value for key, value in params.items() if key != "user_id"}

    try:
        request = schema.model_validate(data)
    except pydantic.ValidationError as e:
        details = field_errors(e)
        logfire.warn(
            "Action validation failed", schema=schema.__name__, fields=list(details)
        )
        raise ValidationError("Invalid request parameters", details) from e

    if authorize:
        if not caller:
            logfire.warn("Unauthenticated action rejected", schema=schema.__name__)
            raise AuthenticationError()
        request = request.model_copy(update={"user_id": caller})

    return request


def handle_error(error: Exception) -> ActionResponse:
    """Convert any failure into a failed ActionResponse.

    Domain errors keep their message and status; unexpected exceptions are
    logged and reported with a generic message and status 500.
    """
    if isinstance(error, ValidationError):
        return ActionResponse.fail(str(error), error.status_code, error.details)

    if isinstance(error, DomainError):
        return ActionResponse.fail(str(error), error.status_code)

    if isinstance(error, pydantic.ValidationError):
        return ActionResponse.fail(
            "Invalid request parameters", 400, field_errors(error)
        )

    logfire.error(
        "Unexpected action failure",
        error=str(error),
        error_type=type(error).__name__,
    )
    return ActionResponse.fail(UNEXPECTED_ERROR_MESSAGE, 500)
