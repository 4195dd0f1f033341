"""Deadline status relative to a reference day supplied by the caller."""

from __future__ import annotations

from datetime import date

from claimtrack.core.config import DeadlineConfig
from claimtrack.core.types import DeadlineKind, DeadlineUrgency
from claimtrack.deadlines.dates import add_calendar_days, days_between
from claimtrack.deadlines.models import DeadlineNotice, DeadlineResult


_FIELDS = DeadlineConfig.model_fields

DEFAULT_URGENT_WITHIN_DAYS: int = _FIELDS["urgent_within_days"].default
DEFAULT_RESERVE_NOTICE_DAYS: int = _FIELDS["notify_reserve_days_before"].default
DEFAULT_PRESCRIPTION_NOTICE_DAYS: int = _FIELDS["notify_prescription_days_before"].default


def days_remaining(deadline: date | None, today: date) -> int | None:
    if deadline is None:
        return None
    return days_between(today, deadline)


def classify_deadline(
    deadline: date | None,
    today: date,
    urgent_within_days: int = DEFAULT_URGENT_WITHIN_DAYS,
) -> DeadlineUrgency:
    """Classify a deadline as expired, urgent, or ok.

    The deadline day itself is still open. A deadline falling before
    ``today + urgent_within_days`` is urgent.
    """
    if deadline is None:
        return DeadlineUrgency.NONE
    if deadline < today:
        return DeadlineUrgency.EXPIRED
    if deadline < add_calendar_days(today, urgent_within_days):
        return DeadlineUrgency.URGENT
    return DeadlineUrgency.OK


def due_notices(
    result: DeadlineResult,
    today: date,
    reserve_days_before: int = DEFAULT_RESERVE_NOTICE_DAYS,
    prescription_days_before: int = DEFAULT_PRESCRIPTION_NOTICE_DAYS,
    urgent_within_days: int = DEFAULT_URGENT_WITHIN_DAYS,
) -> list[DeadlineNotice]:
    """Deadlines of *result* that fall on or before their notice window.

    Already expired deadlines are included so a missed notice is not lost.
    """
    windows = [
        (DeadlineKind.RESERVE, result.reserve_deadline, reserve_days_before),
        (DeadlineKind.PRESCRIPTION, result.prescription_deadline, prescription_days_before),
    ]

    notices: list[DeadlineNotice] = []
    for kind, deadline, days_before in windows:
        if deadline is None:
            continue
        if deadline > add_calendar_days(today, days_before):
            continue
        notices.append(
            DeadlineNotice(
                kind=kind,
                deadline=deadline,
                days_remaining=days_between(today, deadline),
                urgency=classify_deadline(deadline, today, urgent_within_days),
            )
        )
    return notices
