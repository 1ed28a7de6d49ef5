from datetime import datetime

from pydantic import BaseModel

from app.models.enums import InputType, Priority, SubTaskStatus, TaskStatus


class SubTaskInstance(BaseModel):
    id: str
    template_id: str
    label: str
    description: str | None = None
    input_type: InputType
    required: bool = False
    target: str | int | float | None = None
    status: SubTaskStatus = SubTaskStatus.PENDING
    notes: str | None = None
    blocker: str | None = None


class Task(BaseModel):
    id: str
    # Version the checklist was copied from; never rewritten on republish
    template_version_id: str
    team_id: str
    assigned_on: datetime
    due_on: datetime
    priority: Priority = Priority.MEDIUM
    location: str
    status: TaskStatus = TaskStatus.NOT_STARTED
    notes: str | None = None
    sub_tasks: list[SubTaskInstance] = []
