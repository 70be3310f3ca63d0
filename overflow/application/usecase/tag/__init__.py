"""Tag use cases."""

from .get_tag_questions import (
    AuthorRef,
    GetTagQuestionsRequest,
    GetTagQuestionsResponse,
    GetTagQuestionsUseCase,
    QuestionSummary,
    TagRef,
)
from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase, TagSummary

__all__ = [
    "AuthorRef",
    "GetTagQuestionsRequest",
    "GetTagQuestionsResponse",
    "GetTagQuestionsUseCase",
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "QuestionSummary",
    "TagRef",
    "TagSummary",
]
