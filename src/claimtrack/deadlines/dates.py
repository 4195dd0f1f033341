"""Date arithmetic for legal deadlines: calendar and business-day offsets."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Callable

from dateutil.relativedelta import relativedelta

from claimtrack.deadlines.holidays import SUNDAY, is_holiday


def add_calendar_days(start: date, days: int) -> date:
    """Add N calendar days."""
    return start + timedelta(days=days)


def add_calendar_months(start: date, months: int) -> date:
    """Add N calendar months, clamping to the last day of a shorter month."""
    return start + relativedelta(months=months)


def add_calendar_years(start: date, years: int) -> date:
    """Add N calendar years; Feb 29 becomes Feb 28 in a common year."""
    return start + relativedelta(years=years)


def add_business_days(
    start: date,
    days: int,
    holiday_fn: Callable[[date], bool] | None = None,
) -> date:
    """Add N business days to a start date, skipping non-working days.

    The start date itself is never counted. Saturdays count; Sundays and
    fixed holidays do not. ``days=0`` yields the start date when it is a
    business day, otherwise the next business day.
    """
    if days < 0:
        raise ValueError(f"Business day count must be non-negative, got {days}")
    if holiday_fn is None:
        holiday_fn = is_holiday

    current = start
    added = 0
    while added < days:
        current += timedelta(days=1)
        if not holiday_fn(current):
            added += 1
    while holiday_fn(current):
        current += timedelta(days=1)
    return current


def roll_forward_if_sunday(day: date) -> date:
    """Move a Sunday to the following Monday. The Monday is not re-checked."""
    if day.weekday() == SUNDAY:
        return day + timedelta(days=1)
    return day


def days_between(start: date, end: date) -> int:
    """Whole days from *start* to *end*, ignoring any time of day."""
    return (_as_date(end) - _as_date(start)).days


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value
