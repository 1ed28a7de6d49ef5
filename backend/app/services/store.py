"""In-memory store for teams, templates and tasks.

The store owns the canonical collections. Every accessor hands out a deep
copy, so callers can only change state through the operations below. Each
mutating operation validates its input and resolves every reference before
touching a collection: a failed call leaves the store exactly as it was.

Usage:
    store = InMemoryStore(build_seed_data())
    task = store.create_task({...})
    store.complete_sub_task(task.id, task.sub_tasks[0].id)
"""

import logging
import uuid
from datetime import date, datetime, time, timezone
from typing import Any, Mapping

from pydantic import BaseModel

from app.middleware.exceptions import NotFoundError
from app.models.enums import SubTaskStatus, TaskStatus
from app.models.seed import SeedData
from app.models.task import SubTaskInstance, Task
from app.models.team import Member, Team
from app.models.template import SubTaskTemplate, TaskTemplate, TaskTemplateVersion
from app.schemas.schedule import CalendarView, StatusSummary
from app.schemas.template import TemplateDraft
from app.schemas.validators import (
    validate_sub_task_update,
    validate_task_draft,
    validate_template_draft,
)
from app.services.derivation import (
    calendar_matrix,
    task_completion_percent,
    weekly_status_summary,
)
from app.services.task_factory import instantiate_task
from app.utils.dates import as_day, shift_week, start_of_week, week_end, week_range_label

logger = logging.getLogger(__name__)


def _clone(items):
    return [item.model_copy(deep=True) for item in items]


def _build_version(
    template_id: str,
    version: int,
    draft: TemplateDraft,
    sub_task_prefix: str,
) -> TaskTemplateVersion:
    return TaskTemplateVersion(
        id=f"{template_id}-v{version}",
        template_id=template_id,
        version=version,
        name=draft.name,
        description=draft.description,
        expected_duration_minutes=draft.expected_duration_minutes,
        default_location_type=draft.default_location_type,
        sub_tasks=[
            SubTaskTemplate(
                id=f"{sub_task_prefix}-st-{index}",
                label=sub_task.label,
                description=sub_task.description,
                input_type=sub_task.input_type,
                required=sub_task.required,
                default_target=sub_task.default_target,
            )
            for index, sub_task in enumerate(draft.sub_tasks, start=1)
        ],
        published_at=datetime.now(timezone.utc),
    )


class InMemoryStore:
    """Process-wide scheduling state, seeded once and never persisted."""

    def __init__(self, seed: SeedData | None = None):
        seed = seed.model_copy(deep=True) if seed is not None else SeedData()
        self._teams: list[Team] = seed.teams
        self._members: list[Member] = seed.members
        self._templates: list[TaskTemplate] = seed.templates
        self._tasks: list[Task] = seed.tasks
        logger.info(
            "InMemoryStore ready teams=%d templates=%d tasks=%d",
            len(self._teams),
            len(self._templates),
            len(self._tasks),
        )

    # ---- lookups (internal, no copy) ----

    def _find_template(self, template_id: str) -> TaskTemplate:
        for template in self._templates:
            if template.id == template_id:
                return template
        raise NotFoundError("Template", template_id)

    def _find_task(self, task_id: str) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise NotFoundError("Task", task_id)

    @staticmethod
    def _find_sub_task(task: Task, sub_task_id: str) -> SubTaskInstance:
        for sub_task in task.sub_tasks:
            if sub_task.id == sub_task_id:
                return sub_task
        raise NotFoundError("Sub-task", sub_task_id)

    # ---- reads ----

    def list_teams(self) -> list[Team]:
        return _clone(self._teams)

    def list_members(self) -> list[Member]:
        return _clone(self._members)

    def list_templates(self) -> list[TaskTemplate]:
        return _clone(self._templates)

    def list_tasks(self) -> list[Task]:
        return _clone(self._tasks)

    def get_template(self, template_id: str) -> TaskTemplate:
        return self._find_template(template_id).model_copy(deep=True)

    def get_task(self, task_id: str) -> Task:
        return self._find_task(task_id).model_copy(deep=True)

    # ---- templates ----

    def create_template(self, draft: Mapping[str, Any] | BaseModel) -> TaskTemplate:
        """Validate a draft and register it as version 1 of a new template."""
        parsed = validate_template_draft(draft)

        template_id = f"template-{uuid.uuid4().hex[:8]}"
        template = TaskTemplate(
            id=template_id,
            name=parsed.name,
            archived=False,
            current_version=_build_version(template_id, 1, parsed, template_id),
            previous_versions=[],
        )
        self._templates.append(template)

        logger.info("Created template id=%s name=%r", template_id, parsed.name)
        return template.model_copy(deep=True)

    def publish_template_version(
        self,
        template_id: str,
        draft: Mapping[str, Any] | BaseModel | None = None,
    ) -> TaskTemplate:
        """Publish a new current version of a template.

        With a draft the new body comes from it; without one the current
        body is republished. The previous current version moves to the
        front of ``previous_versions`` and is never modified.
        """
        parsed = validate_template_draft(draft) if draft is not None else None
        template = self._find_template(template_id)

        current = template.current_version
        number = current.version + 1
        if parsed is not None:
            next_version = _build_version(
                template_id, number, parsed, f"{template_id}-v{number}"
            )
        else:
            next_version = current.model_copy(
                update={
                    "id": f"{template_id}-v{number}",
                    "version": number,
                    "published_at": datetime.now(timezone.utc),
                },
                deep=True,
            )

        template.previous_versions = [current, *template.previous_versions]
        template.current_version = next_version
        if parsed is not None:
            template.name = parsed.name

        logger.info("Published template id=%s version=%d", template_id, number)
        return template.model_copy(deep=True)

    # ---- tasks ----

    def create_task(self, draft: Mapping[str, Any] | BaseModel) -> Task:
        """Schedule a task from the template's current version."""
        parsed = validate_task_draft(draft)
        template = self._find_template(parsed.template_id)

        task = instantiate_task(
            template.current_version,
            parsed.team_id,
            parsed.start_date,
            {
                "due_on": parsed.due_date,
                "priority": parsed.priority,
                "location": parsed.location,
                "status": TaskStatus.NOT_STARTED,
                "notes": parsed.notes,
            },
        )
        self._tasks.append(task)

        logger.info(
            "Created task id=%s template_version=%s team=%s assigned_on=%s",
            task.id,
            task.template_version_id,
            task.team_id,
            task.assigned_on.isoformat(),
        )
        return task.model_copy(deep=True)

    def update_sub_task(
        self,
        task_id: str,
        sub_task_id: str,
        updates: Mapping[str, Any] | BaseModel,
    ) -> Task:
        """Merge ``updates`` into one sub-task and roll its task status forward.

        Completing a required sub-task sets the task to in_progress, with no
        check against a more advanced status. Reaching 100% completion sets
        done, which wins over the previous rule.
        """
        task = self._find_task(task_id)
        sub_task = self._find_sub_task(task, sub_task_id)
        changes = validate_sub_task_update(updates).model_dump(exclude_unset=True)
        if changes.get("status") is None:
            changes.pop("status", None)

        for field, value in changes.items():
            setattr(sub_task, field, value)

        previous = task.status
        if sub_task.status == SubTaskStatus.COMPLETE and sub_task.required:
            task.status = TaskStatus.IN_PROGRESS
        if task_completion_percent(task) == 100:
            task.status = TaskStatus.DONE

        if task.status != previous:
            logger.info(
                "Task id=%s status %s -> %s", task_id, previous.value, task.status.value
            )
        return task.model_copy(deep=True)

    def complete_sub_task(self, task_id: str, sub_task_id: str) -> Task:
        return self.update_sub_task(task_id, sub_task_id, {"status": SubTaskStatus.COMPLETE})

    def set_task_status(self, task_id: str, status: TaskStatus | str) -> Task:
        """Write a task status directly (e.g. blocked or cancelled).

        No transition rules apply here; derivation treats blocked and
        cancelled as sticky when reading.
        """
        status = TaskStatus(status)
        task = self._find_task(task_id)
        previous = task.status
        task.status = status
        logger.info("Task id=%s status %s -> %s (manual)", task_id, previous.value, status.value)
        return task.model_copy(deep=True)

    # ---- derived views ----

    def get_status_summary(self, week_start: date | datetime | None = None) -> list[StatusSummary]:
        """One weekly summary per team, in roster order."""
        start = as_day(week_start) if week_start is not None else start_of_week()
        return [
            weekly_status_summary(self._tasks, team.id, start).model_copy(deep=True)
            for team in self._teams
        ]

    def get_calendar(self, week_start: date | datetime | None = None) -> CalendarView:
        start = as_day(week_start) if week_start is not None else start_of_week()
        view = CalendarView(
            label=week_range_label(start),
            week_start=start,
            week_end=week_end(start),
            cells=calendar_matrix(self._tasks, start, self._teams),
        )
        return view.model_copy(deep=True)

    def move_week(self, offset: int) -> date:
        """Monday ``offset`` weeks from the week of the first stored task."""
        anchor = self._tasks[0].assigned_on if self._tasks else datetime.combine(
            date.today(), time.min
        )
        return shift_week(start_of_week(anchor), offset)
