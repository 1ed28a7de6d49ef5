"""Pydantic schemas for task template drafts.

Drafts accept snake_case or camelCase keys (``expectedDurationMinutes``).
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.enums import InputType, LocationType

DRAFT_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubTaskDraft(BaseModel):
    label: str = Field(..., min_length=1)
    description: str | None = None
    input_type: InputType
    required: bool
    default_target: str | int | float | None = None

    model_config = DRAFT_CONFIG


class TemplateDraft(BaseModel):
    """Payload for creating a template or publishing a new version."""
    name: str = Field(..., min_length=3)
    description: str | None = None
    expected_duration_minutes: int = Field(..., ge=15)
    default_location_type: LocationType
    sub_tasks: list[SubTaskDraft] = Field(..., min_length=1)

    model_config = DRAFT_CONFIG
