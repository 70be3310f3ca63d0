"""Question routes."""

from typing import Any
import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Cookie
from fastapi.responses import JSONResponse

from overflow.application.usecase.question import (
    CreateQuestionUseCase,
    EditQuestionUseCase,
    GetQuestionUseCase,
)
from overflow.domain.service import JWTService
from overflow.interface.api.responses import envelope, resolve_caller

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


@router.post("", summary="Ask a question")
async def create_question(
    use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    payload: dict[str, Any] = Body(...),
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Create a question and attach its tags.

    Requires authentication.

    Args:
        use_case: Create question use case from DI
        jwt_service: JWT service from DI
        payload: ``{title, content, tags}``
        auth_token: JWT token from cookie

    Returns:
        Envelope with the created question (201) or the failure
    """
    caller = resolve_caller(jwt_service, auth_token)
    with logfire.span("api.create_question", authenticated=caller is not None):
        return envelope(await use_case.run(payload, caller=caller))


@router.patch("/{question_id}", summary="Edit a question")
async def edit_question(
    question_id: str,
    use_case: FromDishka[EditQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    payload: dict[str, Any] = Body(...),
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Replace a question's title, content and tags.

    Only the author can edit.

    Args:
        question_id: Question UUID
        use_case: Edit question use case from DI
        jwt_service: JWT service from DI
        payload: ``{title, content, tags}``
        auth_token: JWT token from cookie

    Returns:
        Envelope with the updated question or the failure
    """
    caller = resolve_caller(jwt_service, auth_token)
    with logfire.span("api.edit_question", question_id=question_id):
        params = {**payload, "question_id": question_id}
        return envelope(await use_case.run(params, caller=caller))


@router.get("/{question_id}", summary="Get a question")
async def get_question(
    question_id: str,
    use_case: FromDishka[GetQuestionUseCase],
) -> JSONResponse:
    """Get a question with its tags."""
    with logfire.span("api.get_question", question_id=question_id):
        return envelope(await use_case.run({"question_id": question_id}))
