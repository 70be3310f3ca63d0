"""Question-tag association synchronization."""

import logfire

from overflow.domain.model.question import Question
from overflow.domain.model.tag import Tag
from overflow.domain.model.tag_question import TagQuestion
from overflow.domain.repository.tag_question import TagQuestionRepository
from overflow.domain.value import TagName

from .base import Service
from .tag_service import TagService


def distinct_tag_names(names: list[TagName]) -> list[TagName]:
    """Drop case-insensitive duplicates, keeping the first casing seen."""
    seen: set[str] = set()
    result: list[TagName] = []
    for name in names:
        if name.canonical not in seen:
            seen.add(name.canonical)
            result.append(name)
    return result


class TagAssociationService(Service):
    """Keeps a question's tag set, tag counters and join records in step.

    All writes go through the repositories handed in, so running this inside
    a transaction makes the whole diff atomic.
    """

    def __init__(
        self,
        tag_service: TagService,
        tag_question_repository: TagQuestionRepository,
    ) -> None:
        """Initialize association service.

        Args:
            tag_service: Tag service used to resolve and release tags
            tag_question_repository: Join record repository
        """
        self.tag_service = tag_service
        self.tag_question_repository = tag_question_repository

    async def attach(self, question: Question, names: list[TagName]) -> Question:
        """Associate a freshly created question with ``names``.

        Returns:
            The question carrying the resolved tag ids (not yet persisted)
        """
        return await self.synchronize(question, [], names)

    async def synchronize(
        self,
        question: Question,
        current_tags: list[Tag],
        desired: list[TagName],
    ) -> Question:
        """Move a question from ``current_tags`` to the ``desired`` names.

        Names are compared case-insensitively. Added names are resolved (and
        counted), removed tags are released, join records are bulk inserted
        and bulk deleted. Tags present on both sides are left untouched.

        Args:
            question: Question being edited
            current_tags: Tags currently attached, as full records
            desired: Tag names requested by the caller

        Returns:
            The question carrying its new tag ids (not yet persisted)
        """
        desired = distinct_tag_names(desired)
        current_names = {tag.canonical_name for tag in current_tags}
        desired_names = {name.canonical for name in desired}

        to_add = [name for name in desired if name.canonical not in current_names]
        to_remove = [tag for tag in current_tags if tag.canonical_name not in desired_names]

        with logfire.span(
            "tag_association_service.synchronize",
            question_id=str(question.id),
            to_add=[name.root for name in to_add],
            to_remove=[tag.name.root for tag in to_remove],
        ):
            tag_ids = list(question.tag_ids)
            new_records: list[TagQuestion] = []

            resolved = await self.tag_service.resolve_many(to_add)
            for name in to_add:
                tag = resolved[name.canonical]
                tag_ids.append(tag.id)
                new_records.append(TagQuestion(tag_id=tag.id, question_id=question.id))

            if to_remove:
                remove_ids = [tag.id for tag in to_remove]
                await self.tag_service.release(remove_ids)
                await self.tag_question_repository.delete_many(question.id, remove_ids)
                dropped = set(remove_ids)
                tag_ids = [tag_id for tag_id in tag_ids if tag_id not in dropped]

            if new_records:
                await self.tag_question_repository.insert_many(new_records)

            logfire.info(
                "Tags synchronized",
                question_id=str(question.id),
                added=len(to_add),
                removed=len(to_remove),
            )
            return question.with_tags(tag_ids)
