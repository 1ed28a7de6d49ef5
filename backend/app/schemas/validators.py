"""Draft validation entry points.

Each validator accepts either a plain mapping (e.g. a decoded JSON body) or
an already-built schema instance, runs the full pydantic schema, and raises
the application's ``ValidationError`` listing every violated field rather
than stopping at the first one.
"""

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.middleware.exceptions import ValidationError
from app.schemas.task import SubTaskUpdate, TaskDraft
from app.schemas.template import TemplateDraft

M = TypeVar("M", bound=BaseModel)


def _validate(schema: type[M], data: Mapping[str, Any] | BaseModel) -> M:
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc


def validate_template_draft(data: Mapping[str, Any] | BaseModel) -> TemplateDraft:
    """Validate a template draft.

    Args:
        data: Draft fields (name, expected_duration_minutes, sub_tasks, ...)

    Returns:
        Validated TemplateDraft

    Raises:
        ValidationError: name shorter than 3 characters, duration under
            15 minutes, no sub-tasks, or a sub-task with an empty label or
            unknown input type
    """
    return _validate(TemplateDraft, data)


def validate_task_draft(data: Mapping[str, Any] | BaseModel) -> TaskDraft:
    """Validate a task draft.

    Args:
        data: Draft fields (template_id, team_id, start_date, location, priority)

    Returns:
        Validated TaskDraft

    Raises:
        ValidationError: missing ids or start date, empty location, or an
            unknown priority
    """
    return _validate(TaskDraft, data)


def validate_sub_task_update(data: Mapping[str, Any] | BaseModel) -> SubTaskUpdate:
    """Validate a partial sub-task update; unknown fields are rejected."""
    return _validate(SubTaskUpdate, data)
