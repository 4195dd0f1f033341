"""Holiday calendar used for legal deadline counting.

A day is non-working when it is a Sunday or when its month-day matches one
of the fixed national holidays listed in ``holidays.yml``. Saturdays are
working days.
"""

from __future__ import annotations

import logging
from datetime import date
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from claimtrack.deadlines.models import Holiday


logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "holidays.yml"

SUNDAY = 6


class HolidayCalendar:
    """Loads fixed holidays from YAML and classifies non-working days."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        self._config_path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH
        self._holidays: tuple[Holiday, ...] = ()
        self._month_days: frozenset[str] = frozenset()
        self._load_config()

    def _load_config(self) -> None:
        with open(self._config_path) as fh:
            raw = yaml.safe_load(fh) or {}

        holidays: dict[str, Holiday] = {}
        for entry in raw.get("holidays", []):
            try:
                holiday = Holiday(**entry)
            except (TypeError, ValidationError) as exc:
                raise ValueError(
                    f"Invalid holiday entry {entry!r} in {self._config_path}: {exc}"
                ) from exc
            if holiday.month_day in holidays:
                raise ValueError(
                    f"Duplicate holiday {holiday.month_day!r} in {self._config_path}"
                )
            holidays[holiday.month_day] = holiday

        self._holidays = tuple(sorted(holidays.values(), key=lambda h: h.month_day))
        self._month_days = frozenset(h.month_day for h in self._holidays)
        logger.info(
            "Loaded %d fixed holidays from %s", len(self._holidays), self._config_path
        )

    @property
    def holidays(self) -> tuple[Holiday, ...]:
        return self._holidays

    @property
    def month_days(self) -> frozenset[str]:
        return self._month_days

    def is_holiday(self, day: date) -> bool:
        """Return True if *day* is a Sunday or a fixed national holiday."""
        if day.weekday() == SUNDAY:
            return True
        return f"{day.month:02d}-{day.day:02d}" in self._month_days


@lru_cache(maxsize=None)
def default_calendar() -> HolidayCalendar:
    """Process-wide calendar built from the bundled holiday list."""
    return HolidayCalendar()


def is_holiday(day: date) -> bool:
    return default_calendar().is_holiday(day)
