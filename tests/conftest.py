"""Shared test fixtures and helpers."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from claimtrack.core.types import ClaimCategory, JurisdictionScope
from claimtrack.deadlines.engine import DeadlineEngine
from claimtrack.deadlines.holidays import HolidayCalendar
from claimtrack.deadlines.models import DeadlineInput


def make_input(
    event_date: date,
    category: ClaimCategory = ClaimCategory.TERRESTRIAL,
    scope: JurisdictionScope = JurisdictionScope.NATIONAL,
    **kwargs,
) -> DeadlineInput:
    """Build a DeadlineInput with national terrestrial defaults."""
    return DeadlineInput(event_date=event_date, category=category, scope=scope, **kwargs)


def write_holidays(path: Path, month_days: list[str]) -> Path:
    """Write a holidays.yml with the given MM-DD entries and return its path."""
    lines = ["holidays:"] if month_days else ["holidays: []"]
    for month_day in month_days:
        lines.append(f'  - month_day: "{month_day}"')
        lines.append(f"    name: Holiday {month_day}")
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def engine() -> DeadlineEngine:
    return DeadlineEngine(calendar=HolidayCalendar())
