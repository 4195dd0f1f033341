"""Deterministic legal deadline engine.

Given the facts of a claim, computes the reserve deadline, the prescription
(or decadence) deadline, and a storage warning for stock in transit. All
computation is anchored to the event date; the clock is never read.
"""

from __future__ import annotations

import logging
from datetime import date
from functools import lru_cache
from typing import assert_never

from claimtrack.core.types import ClaimCategory
from claimtrack.deadlines.dates import (
    add_business_days,
    add_calendar_days,
    add_calendar_months,
    add_calendar_years,
    days_between,
    roll_forward_if_sunday,
)
from claimtrack.deadlines.holidays import HolidayCalendar, default_calendar
from claimtrack.deadlines.models import DeadlineInput, DeadlineResult
from claimtrack.deadlines.rules import (
    SIT_COVERAGE_THRESHOLD_DAYS,
    PrescriptionRule,
    ReserveCounting,
    ReserveRule,
    select_rules,
)


logger = logging.getLogger(__name__)


class DeadlineEngine:
    """Computes reserve and prescription deadlines for a claim."""

    def __init__(self, calendar: HolidayCalendar | None = None) -> None:
        self._calendar = calendar if calendar is not None else default_calendar()

    @property
    def calendar(self) -> HolidayCalendar:
        return self._calendar

    def calculate(self, deadline_input: DeadlineInput) -> DeadlineResult:
        rules = select_rules(
            deadline_input.category,
            deadline_input.scope,
            has_gross_negligence=deadline_input.has_gross_negligence,
        )
        logger.debug(
            "Deadline rules for %s/%s: reserve=%s prescription=%s",
            rules.category,
            rules.scope,
            rules.reserve,
            rules.prescription,
        )

        event_date = deadline_input.event_date
        sit_warning = None
        if deadline_input.category == ClaimCategory.STOCK_IN_TRANSIT:
            sit_warning = storage_warning(
                deadline_input.stock_inbound_date,
                deadline_input.stock_outbound_date,
            )

        return DeadlineResult(
            reserve_deadline=self.reserve_deadline(rules.reserve, event_date),
            prescription_deadline=self.prescription_deadline(
                rules.prescription, event_date
            ),
            is_decadence=rules.prescription.is_decadence,
            sit_warning=sit_warning,
        )

    def reserve_deadline(self, rule: ReserveRule, event_date: date) -> date:
        match rule.counting:
            case ReserveCounting.CALENDAR_DAYS:
                due = add_calendar_days(event_date, rule.days)
                if rule.roll_forward_sunday:
                    due = roll_forward_if_sunday(due)
                return due
            case ReserveCounting.BUSINESS_DAYS:
                return add_business_days(
                    event_date, rule.days, holiday_fn=self._calendar.is_holiday
                )
            case _:
                assert_never(rule.counting)

    @staticmethod
    def prescription_deadline(rule: PrescriptionRule, event_date: date) -> date:
        due = add_calendar_years(event_date, rule.years)
        return add_calendar_months(due, rule.months)


def storage_warning(
    inbound: date | None,
    outbound: date | None,
    threshold_days: int = SIT_COVERAGE_THRESHOLD_DAYS,
) -> str | None:
    """Warn when goods sat in transit storage longer than the coverage window."""
    if inbound is None or outbound is None:
        return None
    duration = days_between(inbound, outbound)
    if duration <= threshold_days:
        return None
    return (
        f"Attenzione: Storage in transito di {duration} gg, oltre la soglia di "
        f"{threshold_days} gg. La merce potrebbe non rientrare nella copertura "
        f"assicurativa standard."
    )


@lru_cache(maxsize=None)
def default_engine() -> DeadlineEngine:
    return DeadlineEngine()


def calculate_deadlines(deadline_input: DeadlineInput) -> DeadlineResult:
    """Compute the deadlines for a claim using the bundled holiday calendar."""
    return default_engine().calculate(deadline_input)
