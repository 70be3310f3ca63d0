"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Mapping, Optional

import logfire
from pydantic import BaseModel

from overflow.application.action import ActionResponse, handle_error, validate_action


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    ``execute`` takes an already validated request and raises domain errors.
    ``run`` is the action entry point: it validates raw parameters against
    ``schema``, executes, and folds every outcome into an ActionResponse.
    """

    schema: ClassVar[type[BaseModel]]
    authorize: ClassVar[bool] = False
    success_status: ClassVar[int] = 200

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass

    async def run(
        self, params: Mapping[str, Any], caller: Optional[str] = None
    ) -> ActionResponse:
        """Validate, execute and wrap the result in an envelope.

        Args:
            params: Raw input parameters
            caller: Authenticated user ID, if any

        Returns:
            Success envelope with the response as data, or a failure envelope
        """
        try:
            request = validate_action(
                self.schema, params, caller=caller, authorize=self.authorize
            )
            data = await self.execute(request)
        except Exception as e:
            logfire.warn(
                "Action failed",
                action=type(self).__name__,
                error=str(e),
                error_type=type(e).__name__,
            )
            return handle_error(e)

        return ActionResponse.ok(data, status=self.success_status)
