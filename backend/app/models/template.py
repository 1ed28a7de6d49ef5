"""Task templates and their published versions.

A version is an immutable snapshot: amendments publish a new version and
push the old one onto ``previous_versions`` (newest first).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import InputType, LocationType


class SubTaskTemplate(BaseModel):
    id: str
    label: str
    description: str | None = None
    input_type: InputType
    required: bool = False
    default_target: str | int | float | None = None

    model_config = ConfigDict(frozen=True)


class TaskTemplateVersion(BaseModel):
    id: str
    template_id: str
    version: int = Field(..., ge=1)
    name: str
    description: str | None = None
    expected_duration_minutes: int
    default_location_type: LocationType = LocationType.YARD
    sub_tasks: list[SubTaskTemplate]
    published_at: datetime

    model_config = ConfigDict(frozen=True)


class TaskTemplate(BaseModel):
    id: str
    name: str
    archived: bool = False
    current_version: TaskTemplateVersion
    previous_versions: list[TaskTemplateVersion] = []

    @property
    def versions(self) -> list[TaskTemplateVersion]:
        """All versions, newest first."""
        return [self.current_version, *self.previous_versions]
