"""Derived task state and weekly views.

All functions are pure: they read task snapshots and never mutate them.
"""

from datetime import date, datetime
from typing import Iterable, Sequence

from app.models.enums import STICKY_STATUSES, SubTaskStatus, TaskStatus
from app.models.task import Task
from app.models.team import Team
from app.schemas.schedule import CalendarCell, StatusSummary
from app.services.seed import SEED_TEAMS
from app.utils.dates import as_day, in_week, start_of_week, week_days, week_end


def _percent(part: int, whole: int) -> int:
    """Half-up rounded percentage; 0 for an empty whole."""
    if whole == 0:
        return 0
    return int(100 * part / whole + 0.5)


def task_completion_percent(task: Task) -> int:
    completed = sum(1 for st in task.sub_tasks if st.status == SubTaskStatus.COMPLETE)
    return _percent(completed, len(task.sub_tasks))


def derive_status(task: Task) -> TaskStatus:
    """Roll sub-task completion up into a task status.

    Blocked and cancelled are manual states and are returned unchanged.
    """
    if task.status in STICKY_STATUSES:
        return task.status
    if all(st.status == SubTaskStatus.COMPLETE for st in task.sub_tasks):
        return TaskStatus.DONE
    if any(st.status == SubTaskStatus.COMPLETE for st in task.sub_tasks):
        return TaskStatus.IN_PROGRESS
    return TaskStatus.NOT_STARTED


def weekly_status_summary(
    tasks: Iterable[Task],
    team_id: str,
    week_start: date | datetime,
) -> StatusSummary:
    """Summarise one team's week.

    ``completion_rate`` counts tasks whose *derived* status is done, while
    ``blockers`` and ``in_progress`` count the *stored* status. The two can
    disagree, e.g. a blocked task whose checklist is fully ticked counts as
    a blocker and not as done.
    """
    start = as_day(week_start)
    week = [t for t in tasks if t.team_id == team_id and in_week(t.assigned_on, start)]

    done = sum(1 for t in week if derive_status(t) == TaskStatus.DONE)
    blockers = sum(1 for t in week if t.status == TaskStatus.BLOCKED)
    in_progress = sum(1 for t in week if t.status == TaskStatus.IN_PROGRESS)

    return StatusSummary(
        team_id=team_id,
        week_start=start,
        week_end=week_end(start),
        completion_rate=_percent(done, len(week)),
        blockers=blockers,
        in_progress=in_progress,
        scheduled=len(week),
    )


def calendar_matrix(
    tasks: Sequence[Task],
    week_start: date | datetime | None = None,
    teams: Sequence[Team] | None = None,
) -> list[CalendarCell]:
    """One cell per (team, day), team-major then day-minor.

    Always ``7 * len(teams)`` cells, empty ones included. Without an explicit
    roster the seeded teams are used.
    """
    if week_start is None:
        week_start = start_of_week()
    if teams is None:
        teams = SEED_TEAMS

    cells = []
    for team in teams:
        for day in week_days(week_start):
            day_tasks = [
                t for t in tasks
                if t.team_id == team.id and as_day(t.assigned_on) == day
            ]
            cells.append(CalendarCell(date=day, team_id=team.id, tasks=day_tasks))
    return cells
