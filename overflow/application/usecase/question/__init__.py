"""Question use cases."""

from .common import QuestionResponse, TagItem
from .create_question import CreateQuestionRequest, CreateQuestionUseCase
from .edit_question import EditQuestionRequest, EditQuestionUseCase
from .get_question import GetQuestionRequest, GetQuestionUseCase

__all__ = [
    "CreateQuestionRequest",
    "CreateQuestionUseCase",
    "EditQuestionRequest",
    "EditQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionUseCase",
    "QuestionResponse",
    "TagItem",
]
