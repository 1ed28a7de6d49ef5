"""Weekly views: per-team status summary and the team x day calendar.

``week_start`` defaults to the Monday of the current week.
"""

from datetime import date

from fastapi import APIRouter, Depends

from app.deps import get_store
from app.schemas.schedule import CalendarView, StatusSummary
from app.services.store import InMemoryStore

router = APIRouter()


@router.get("/summary", response_model=list[StatusSummary])
async def get_status_summary(
    week_start: date | None = None,
    store: InMemoryStore = Depends(get_store),
):
    return store.get_status_summary(week_start)


@router.get("/calendar", response_model=CalendarView)
async def get_calendar(
    week_start: date | None = None,
    store: InMemoryStore = Depends(get_store),
):
    return store.get_calendar(week_start)


@router.get("/weeks/{offset}")
async def move_week(
    offset: int,
    store: InMemoryStore = Depends(get_store),
):
    """Monday of the week ``offset`` weeks from the scheduled work."""
    return {"week_start": store.move_week(offset)}
