"""Task instantiation and derived status / weekly view tests."""

import random
from datetime import date, datetime, timedelta, timezone

import pytest

from app.config import settings
from app.models.enums import Priority, SubTaskStatus, TaskStatus
from app.models.team import Team
from app.services.derivation import (
    calendar_matrix,
    derive_status,
    task_completion_percent,
    weekly_status_summary,
)
from app.services.seed import SEED_TEAMS
from app.services.task_factory import instantiate_task

MONDAY = datetime(2024, 3, 4)


def _spring_version(seed):
    return seed.templates[0].current_version


def _with_progress(task, completed: int, status: TaskStatus | None = None):
    """Copy of ``task`` with the first ``completed`` sub-tasks ticked."""
    task = task.model_copy(deep=True)
    for sub_task in task.sub_tasks[:completed]:
        sub_task.status = SubTaskStatus.COMPLETE
    if status is not None:
        task.status = status
    return task


@pytest.mark.unit
class TestInstantiateTask:

    def test_copies_checklist_in_order(self, seed):
        version = _spring_version(seed)
        task = instantiate_task(version, "team-north", MONDAY, task_id="task-x")

        assert task.template_version_id == version.id
        assert [st.label for st in task.sub_tasks] == [st.label for st in version.sub_tasks]
        assert [st.template_id for st in task.sub_tasks] == [st.id for st in version.sub_tasks]
        assert [st.id for st in task.sub_tasks] == ["task-x-st-1", "task-x-st-2", "task-x-st-3"]
        assert task.sub_tasks[1].target == 2
        assert all(st.status == SubTaskStatus.PENDING for st in task.sub_tasks)

    def test_defaults(self, seed):
        task = instantiate_task(_spring_version(seed), "team-north", MONDAY)
        assert task.due_on == MONDAY
        assert task.priority == Priority.MEDIUM
        assert task.location == settings.default_location
        assert task.status == TaskStatus.NOT_STARTED
        assert task.id.startswith("task-")

    def test_overrides(self, seed):
        due = MONDAY + timedelta(days=2)
        task = instantiate_task(
            _spring_version(seed),
            "team-south",
            MONDAY,
            {"due_on": due, "priority": Priority.URGENT, "location": "Orchard 9", "notes": "Gate code 42"},
        )
        assert task.due_on == due
        assert task.priority == Priority.URGENT
        assert task.location == "Orchard 9"
        assert task.notes == "Gate code 42"

    def test_aware_dates_stored_as_naive_utc(self, seed):
        plus_two = timezone(timedelta(hours=2))
        task = instantiate_task(
            _spring_version(seed),
            "team-north",
            datetime(2024, 3, 5, 11, 0, tzinfo=plus_two),
            {"due_on": datetime(2024, 3, 6, 0, 30, tzinfo=plus_two)},
        )
        assert task.assigned_on == datetime(2024, 3, 5, 9, 0)
        assert task.due_on == datetime(2024, 3, 5, 22, 30)
        assert task.assigned_on.tzinfo is None


@pytest.mark.unit
class TestCompletionPercent:

    def test_no_sub_tasks_is_zero(self, seed):
        task = seed.tasks[0].model_copy(update={"sub_tasks": []})
        assert task_completion_percent(task) == 0

    def test_rounds_to_nearest(self, seed):
        task = seed.tasks[0]
        assert [task_completion_percent(_with_progress(task, n)) for n in range(4)] == [0, 33, 67, 100]

    def test_hundred_only_when_all_complete(self, seed):
        task = seed.tasks[2]
        assert task_completion_percent(_with_progress(task, 1)) == 50
        assert task_completion_percent(_with_progress(task, 2)) == 100


@pytest.mark.unit
class TestDeriveStatus:

    @pytest.mark.parametrize("completed,expected", [
        (0, TaskStatus.NOT_STARTED),
        (1, TaskStatus.IN_PROGRESS),
        (3, TaskStatus.DONE),
    ])
    def test_rolls_up_sub_tasks(self, seed, completed, expected):
        task = _with_progress(seed.tasks[1], completed)
        assert derive_status(task) == expected

    @pytest.mark.parametrize("sticky", [TaskStatus.BLOCKED, TaskStatus.CANCELLED])
    @pytest.mark.parametrize("completed", [0, 1, 3])
    def test_manual_states_are_sticky(self, seed, sticky, completed):
        task = _with_progress(seed.tasks[1], completed, sticky)
        assert derive_status(task) == sticky

    def test_ignores_stored_in_progress(self, seed):
        """Stored in_progress is recomputed from the checklist."""
        task = _with_progress(seed.tasks[0], 0, TaskStatus.IN_PROGRESS)
        assert derive_status(task) == TaskStatus.NOT_STARTED


@pytest.mark.unit
class TestWeeklyStatusSummary:

    def test_seeded_week(self, seed):
        north = weekly_status_summary(seed.tasks, "team-north", date(2024, 3, 4))
        assert north.scheduled == 2
        assert north.in_progress == 1
        assert north.blockers == 0
        assert north.completion_rate == 0
        assert north.week_start == date(2024, 3, 4)
        assert north.week_end == date(2024, 3, 10)

        mobile = weekly_status_summary(seed.tasks, "team-mobile", date(2024, 3, 4))
        assert mobile.blockers == 1
        assert mobile.scheduled == 1

    def test_empty_week(self, seed):
        summary = weekly_status_summary(seed.tasks, "team-north", date(2024, 3, 11))
        assert summary.scheduled == 0
        assert summary.completion_rate == 0

    def test_window_is_inclusive(self, seed):
        version = _spring_version(seed)
        sunday_night = instantiate_task(version, "team-north", datetime(2024, 3, 10, 23, 30))
        next_monday = instantiate_task(version, "team-north", datetime(2024, 3, 11))
        previous_sunday = instantiate_task(version, "team-north", datetime(2024, 3, 3, 12))

        summary = weekly_status_summary(
            [sunday_night, next_monday, previous_sunday], "team-north", date(2024, 3, 4)
        )
        assert summary.scheduled == 1

    def test_completion_rate(self, seed):
        tasks = [
            _with_progress(seed.tasks[0], 3),
            seed.tasks[3],
            _with_progress(seed.tasks[3], 2).model_copy(update={"id": "task-5"}),
        ]
        summary = weekly_status_summary(tasks, "team-north", date(2024, 3, 4))
        assert summary.scheduled == 3
        assert summary.completion_rate == 67

    def test_order_independent(self, seed):
        tasks = seed.tasks + [_with_progress(seed.tasks[0], 3)]
        expected = weekly_status_summary(tasks, "team-north", date(2024, 3, 4))
        shuffled = list(tasks)
        random.Random(7).shuffle(shuffled)
        assert weekly_status_summary(shuffled, "team-north", date(2024, 3, 4)) == expected
        assert weekly_status_summary(list(reversed(tasks)), "team-north", date(2024, 3, 4)) == expected

    def test_stored_and_derived_status_diverge(self, seed):
        """Blockers / in-progress read stored status; completion reads derived status.

        A blocked task with a fully ticked checklist counts as a blocker and
        not as done; an in_progress task with a fully ticked checklist counts
        both as in progress and as done.
        """
        blocked_but_complete = _with_progress(seed.tasks[2], 2, TaskStatus.BLOCKED)
        summary = weekly_status_summary([blocked_but_complete], "team-mobile", date(2024, 3, 4))
        assert summary.blockers == 1
        assert summary.completion_rate == 0

        stale_in_progress = _with_progress(seed.tasks[0], 3, TaskStatus.IN_PROGRESS)
        summary = weekly_status_summary([stale_in_progress], "team-north", date(2024, 3, 4))
        assert summary.in_progress == 1
        assert summary.completion_rate == 100


@pytest.mark.unit
class TestCalendarMatrix:

    def test_one_cell_per_team_and_day(self, seed):
        cells = calendar_matrix(seed.tasks, date(2024, 3, 4), seed.teams)
        assert len(cells) == 7 * len(seed.teams)
        assert [(c.team_id, c.date) for c in cells[:8]] == [
            ("team-north", date(2024, 3, 4) + timedelta(days=i)) for i in range(7)
        ] + [("team-south", date(2024, 3, 4))]

    def test_empty_task_list(self, seed):
        cells = calendar_matrix([], date(2024, 3, 4), seed.teams)
        assert len(cells) == 21
        assert all(c.tasks == [] for c in cells)

    def test_buckets_by_calendar_day(self, seed):
        late = instantiate_task(
            _spring_version(seed), "team-south", datetime(2024, 3, 5, 18, 45), task_id="task-late"
        )
        cells = calendar_matrix(seed.tasks + [late], date(2024, 3, 4), seed.teams)
        by_key = {(c.team_id, c.date): [t.id for t in c.tasks] for c in cells}

        assert by_key[("team-north", date(2024, 3, 4))] == ["task-1"]
        assert by_key[("team-south", date(2024, 3, 5))] == ["task-2", "task-late"]
        assert by_key[("team-mobile", date(2024, 3, 6))] == ["task-3"]
        assert by_key[("team-north", date(2024, 3, 8))] == ["task-4"]
        assert sum(len(ids) for ids in by_key.values()) == 5

    def test_custom_roster(self, seed):
        roster = [Team(id="team-night", name="Night Crew", coverage="Statewide")]
        cells = calendar_matrix(seed.tasks, date(2024, 3, 4), roster)
        assert len(cells) == 7
        assert all(c.tasks == [] for c in cells)

    def test_defaults_to_seeded_roster(self, seed):
        cells = calendar_matrix(seed.tasks, date(2024, 3, 4))
        assert len(cells) == 7 * len(SEED_TEAMS)
