"""Week arithmetic. Weeks start on Monday and span seven calendar days."""

from datetime import date, datetime, timedelta, timezone

DAYS_IN_WEEK = 7


def as_day(value: date | datetime) -> date:
    """Truncate a timestamp to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def start_of_week(value: date | datetime | None = None) -> date:
    """Monday of the week containing ``value`` (default: today)."""
    day = as_day(value) if value is not None else date.today()
    return day - timedelta(days=day.weekday())


def week_end(week_start: date | datetime) -> date:
    """Last day (inclusive) of the seven-day window opening at ``week_start``."""
    return as_day(week_start) + timedelta(days=DAYS_IN_WEEK - 1)


def week_days(week_start: date | datetime) -> list[date]:
    start = as_day(week_start)
    return [start + timedelta(days=i) for i in range(DAYS_IN_WEEK)]


def shift_week(week_start: date | datetime, offset: int) -> date:
    """Monday of the week ``offset`` weeks away from ``week_start``."""
    return start_of_week(as_day(week_start) + timedelta(weeks=offset))


def in_week(value: date | datetime, week_start: date | datetime) -> bool:
    day = as_day(value)
    return as_day(week_start) <= day <= week_end(week_start)


def week_range_label(week_start: date | datetime) -> str:
    """Human label for a week, e.g. ``"Mar 4 – Mar 10"``."""
    start = as_day(week_start)
    end = week_end(start)
    return f"{start:%b} {start.day} – {end:%b} {end.day}"


def to_naive_utc(value: datetime) -> datetime:
    """Drop tzinfo after converting to UTC; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
