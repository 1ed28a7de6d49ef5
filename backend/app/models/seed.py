from pydantic import BaseModel

from app.models.task import Task
from app.models.team import Member, Team
from app.models.template import TaskTemplate


class SeedData(BaseModel):
    """Initial contents handed to the in-memory store."""
    teams: list[Team] = []
    members: list[Member] = []
    templates: list[TaskTemplate] = []
    tasks: list[Task] = []
