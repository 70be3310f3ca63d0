"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from overflow.application.usecase.tag import GetTagQuestionsUseCase, ListTagsUseCase
from overflow.config import PaginationSettings
from overflow.interface.api.responses import envelope

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


def _query_params(request: Request, pagination: PaginationSettings) -> dict[str, str | int]:
    params: dict[str, str | int] = {"page_size": pagination.default_page_size}
    params.update(request.query_params)
    return params


@router.get(
    "",
    summary="List tags",
    description="Paginated tags, filterable by name and ordered by popularity, "
    "date or name.",
)
async def list_tags(
    request: Request,
    use_case: FromDishka[ListTagsUseCase],
    pagination: FromDishka[PaginationSettings],
) -> JSONResponse:
    """List tags.

    Query parameters are validated by the use case: ``page``,
    ``page_size``, ``query``, ``filter`` (popular, recent, oldest, name) and
    ``sort`` (asc, desc).

    Example:
        GET /tags?page=2&page_size=10&filter=name
    """
    params = _query_params(request, pagination)
    with logfire.span("api.list_tags", params=params):
        return envelope(await use_case.run(params))


@router.get("/{tag_id}/questions", summary="List questions for a tag")
async def get_tag_questions(
    tag_id: str,
    request: Request,
    use_case: FromDishka[GetTagQuestionsUseCase],
    pagination: FromDishka[PaginationSettings],
) -> JSONResponse:
    """List the questions filed under a tag, newest first.

    Example:
        GET /tags/{tag_id}/questions?page=1&query=async
    """
    params = {**_query_params(request, pagination), "tag_id": tag_id}
    with logfire.span("api.get_tag_questions", tag_id=tag_id):
        return envelope(await use_case.run(params))
