"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .pagination import has_next_page, parse_filter, resolve_search
from .question_service import QuestionService
from .tag_association_service import TagAssociationService, distinct_tag_names
from .tag_service import TagService
from .user_service import UserService

__all__ = [
    "JWTService",
    "QuestionService",
    "Service",
    "TagAssociationService",
    "TagService",
    "UserService",
    "distinct_tag_names",
    "has_next_page",
    "parse_filter",
    "resolve_search",
]
