"""Derived weekly views. Never stored; rebuilt from the task snapshot."""

from datetime import date

from pydantic import BaseModel

from app.models.task import Task


class CalendarCell(BaseModel):
    date: date
    team_id: str
    tasks: list[Task]


class StatusSummary(BaseModel):
    team_id: str
    week_start: date
    week_end: date
    completion_rate: int
    blockers: int
    in_progress: int
    scheduled: int


class CalendarView(BaseModel):
    label: str
    week_start: date
    week_end: date
    cells: list[CalendarCell]
