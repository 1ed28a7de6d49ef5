"""Task instantiation from a published template version.

Copies every sub-task definition of the chosen version into a fresh
checklist, in order, so later republishing of the template never changes
an already-scheduled task.
"""

import uuid
from datetime import datetime
from typing import Any, Mapping

from app.config import settings
from app.models.enums import Priority, SubTaskStatus, TaskStatus
from app.models.task import SubTaskInstance, Task
from app.models.template import TaskTemplateVersion
from app.utils.dates import to_naive_utc


def new_task_id() -> str:
    return f"task-{uuid.uuid4().hex[:8]}"


def instantiate_task(
    version: TaskTemplateVersion,
    team_id: str,
    assigned_on: datetime,
    overrides: Mapping[str, Any] | None = None,
    *,
    task_id: str | None = None,
) -> Task:
    """Build a Task whose checklist mirrors ``version.sub_tasks``.

    Recognised overrides: ``due_on``, ``priority``, ``location``, ``status``,
    ``notes``. Without overrides the task is due on its assigned date, has
    medium priority, the configured default location and no progress.
    Timezone-aware datetimes are stored as naive UTC.
    """
    overrides = overrides or {}
    task_id = task_id or new_task_id()
    assigned_on = to_naive_utc(assigned_on)
    due_on = overrides.get("due_on")
    due_on = to_naive_utc(due_on) if due_on is not None else assigned_on

    sub_tasks = [
        SubTaskInstance(
            id=f"{task_id}-st-{index}",
            template_id=sub_task.id,
            label=sub_task.label,
            description=sub_task.description,
            input_type=sub_task.input_type,
            required=sub_task.required,
            target=sub_task.default_target,
            status=SubTaskStatus.PENDING,
        )
        for index, sub_task in enumerate(version.sub_tasks, start=1)
    ]

    return Task(
        id=task_id,
        template_version_id=version.id,
        team_id=team_id,
        assigned_on=assigned_on,
        due_on=due_on,
        priority=overrides.get("priority") or Priority.MEDIUM,
        location=overrides.get("location") or settings.default_location,
        status=overrides.get("status") or TaskStatus.NOT_STARTED,
        notes=overrides.get("notes"),
        sub_tasks=sub_tasks,
    )
