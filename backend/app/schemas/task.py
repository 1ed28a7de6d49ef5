"""Pydantic schemas for task drafts and partial updates."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.enums import Priority, SubTaskStatus, TaskStatus


# ── Create ───────────────────────────────────────────────────

class TaskDraft(BaseModel):
    """Payload for scheduling a task from a template.

    Only presence of ``template_id`` / ``team_id`` is checked here; the store
    resolves the references.
    """
    template_id: str = Field(..., min_length=1)
    team_id: str = Field(..., min_length=1)
    start_date: datetime
    location: str = Field(..., min_length=1)
    priority: Priority
    notes: str | None = None
    due_date: datetime | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Update (partial) ─────────────────────────────────────────

class SubTaskUpdate(BaseModel):
    status: SubTaskStatus | None = None
    notes: str | None = None
    blocker: str | None = None
    target: str | int | float | None = None

    model_config = ConfigDict(extra="forbid")


class TaskStatusUpdate(BaseModel):
    status: TaskStatus
