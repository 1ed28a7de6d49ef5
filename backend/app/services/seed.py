"""Startup roster, templates and a week of sample tasks."""

from datetime import date, datetime, time, timedelta

from app.models.enums import InputType, LocationType, MemberRole, Priority, TaskStatus
from app.models.seed import SeedData
from app.models.team import Member, Team
from app.models.template import SubTaskTemplate, TaskTemplate, TaskTemplateVersion
from app.services.task_factory import instantiate_task
from app.utils.dates import start_of_week

SEED_TEAMS = (
    Team(id="team-north", name="North Apiary", coverage="Cascade Foothills"),
    Team(id="team-south", name="South Apiary", coverage="Valley Orchards"),
    Team(id="team-mobile", name="Mobile Support", coverage="Statewide"),
)

SEED_MEMBERS = (
    Member(id="manager-1", name="Jules Kim", role=MemberRole.MANAGER),
    Member(id="beekeeper-1", name="Mara Singh", role=MemberRole.BEEKEEPER, team_id="team-north"),
    Member(id="beekeeper-2", name="Rafi Patel", role=MemberRole.BEEKEEPER, team_id="team-south"),
    Member(id="beekeeper-3", name="Colin Abara", role=MemberRole.BEEKEEPER, team_id="team-mobile"),
)


def _spring_inspection(published_at: datetime) -> TaskTemplate:
    template_id = "template-spring-inspection"
    v1 = TaskTemplateVersion(
        id=f"{template_id}-v1",
        template_id=template_id,
        version=1,
        name="Spring Inspection",
        description="Seasonal inspection covering brood frames, mite treatment, and queen assessment.",
        expected_duration_minutes=180,
        default_location_type=LocationType.YARD,
        sub_tasks=[
            SubTaskTemplate(
                id=f"{template_id}-st1",
                label="Inspect brood frames",
                description="Confirm brood pattern health",
                input_type=InputType.CHECKBOX,
                required=True,
            ),
            SubTaskTemplate(
                id=f"{template_id}-st2",
                label="Varroa mite count",
                description="Record sticky board mite count",
                input_type=InputType.NUMBER,
                required=True,
                default_target=3,
            ),
            SubTaskTemplate(
                id=f"{template_id}-st3",
                label="Queen status",
                description="Note queen temperament and laying pattern",
                input_type=InputType.TEXT,
                required=False,
            ),
        ],
        published_at=published_at,
    )
    v2 = TaskTemplateVersion(
        id=f"{template_id}-v2",
        template_id=template_id,
        version=2,
        name="Spring Inspection v2",
        description=v1.description,
        expected_duration_minutes=180,
        default_location_type=LocationType.YARD,
        sub_tasks=[
            SubTaskTemplate(
                id=f"{template_id}-st1",
                label="Inspect brood frames",
                input_type=InputType.CHECKBOX,
                required=True,
            ),
            SubTaskTemplate(
                id=f"{template_id}-st2",
                label="Varroa mite count",
                input_type=InputType.NUMBER,
                required=True,
                default_target=2,
            ),
            SubTaskTemplate(
                id=f"{template_id}-st3",
                label="Record queen health",
                input_type=InputType.TEXT,
                required=False,
            ),
        ],
        published_at=published_at,
    )
    return TaskTemplate(
        id=template_id,
        name="Spring Inspection",
        current_version=v2,
        previous_versions=[v1],
    )


def _pollination_readiness(published_at: datetime) -> TaskTemplate:
    template_id = "template-pollination-check"
    v1 = TaskTemplateVersion(
        id=f"{template_id}-v1",
        template_id=template_id,
        version=1,
        name="Pollination Readiness",
        description="Ensure hives are ready for pollination contracts.",
        expected_duration_minutes=180,
        default_location_type=LocationType.YARD,
        sub_tasks=[
            SubTaskTemplate(
                id=f"{template_id}-st1",
                label="Check nectar stores",
                input_type=InputType.NUMBER,
                required=True,
                default_target=40,
            ),
            SubTaskTemplate(
                id=f"{template_id}-st2",
                label="Confirm hive strength",
                input_type=InputType.TEXT,
                required=True,
            ),
        ],
        published_at=published_at,
    )
    return TaskTemplate(
        id=template_id,
        name="Pollination Readiness",
        current_version=v1,
    )


def build_seed_data(week_start: date | None = None) -> SeedData:
    """Fresh seed objects anchored on ``week_start`` (default: this week)."""
    start = datetime.combine(start_of_week(week_start), time.min)

    spring = _spring_inspection(start)
    pollination = _pollination_readiness(start)

    def scheduled(task_id, template, team_id, offset_days, **overrides):
        return instantiate_task(
            template.current_version,
            team_id,
            start + timedelta(days=offset_days),
            overrides,
            task_id=task_id,
        )

    tasks = [
        scheduled(
            "task-1", spring, "team-north", 0,
            status=TaskStatus.IN_PROGRESS, location="Evergreen Yard",
        ),
        scheduled(
            "task-2", spring, "team-south", 1,
            status=TaskStatus.NOT_STARTED, location="Valley Orchard 4", priority=Priority.HIGH,
        ),
        scheduled(
            "task-3", pollination, "team-mobile", 2,
            status=TaskStatus.BLOCKED, notes="Vehicle maintenance",
        ),
        scheduled(
            "task-4", pollination, "team-north", 4,
            status=TaskStatus.NOT_STARTED, location="Blueberry Farm",
        ),
    ]

    return SeedData(
        teams=[team.model_copy() for team in SEED_TEAMS],
        members=[member.model_copy() for member in SEED_MEMBERS],
        templates=[spring, pollination],
        tasks=tasks,
    )
