"""Legal deadline calculation for transport and storage claims.

Provides the holiday calendar, date arithmetic, the per-category rule matrix
and the engine that combines them.
"""

from claimtrack.deadlines.engine import DeadlineEngine, calculate_deadlines
from claimtrack.deadlines.holidays import HolidayCalendar, is_holiday
from claimtrack.deadlines.models import DeadlineInput, DeadlineResult
from claimtrack.deadlines.rules import RuleSet, select_rules

__all__ = [
    "DeadlineEngine",
    "DeadlineInput",
    "DeadlineResult",
    "HolidayCalendar",
    "RuleSet",
    "calculate_deadlines",
    "is_holiday",
    "select_rules",
]
