"""Aggregate model imports."""

from app.models.enums import (  # noqa: F401
    InputType,
    LocationType,
    MemberRole,
    Priority,
    SubTaskStatus,
    TaskStatus,
)
from app.models.seed import SeedData  # noqa: F401
from app.models.task import SubTaskInstance, Task  # noqa: F401
from app.models.team import Member, Team  # noqa: F401
from app.models.template import (  # noqa: F401
    SubTaskTemplate,
    TaskTemplate,
    TaskTemplateVersion,
)
