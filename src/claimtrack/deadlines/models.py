"""Deadline data models: claim inputs, computed results, and notices."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from claimtrack.core.types import (
    ClaimCategory,
    DeadlineKind,
    DeadlineUrgency,
    JurisdictionScope,
)


class Holiday(BaseModel):
    """A fixed national holiday, recurring every year on the same day."""

    model_config = ConfigDict(frozen=True)

    month_day: str = Field(pattern=r"^(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])$")
    name: str = ""


class DeadlineInput(BaseModel):
    """Claim facts the deadline engine needs.

    Dates are calendar dates; ``datetime`` values and ISO datetime strings
    are truncated to their date so the time of day never shifts a deadline.
    The stock outbound date may not precede the inbound date.
    """

    model_config = ConfigDict(frozen=True)

    event_date: date
    category: ClaimCategory
    scope: JurisdictionScope
    has_gross_negligence: bool = False
    stock_inbound_date: date | None = None
    stock_outbound_date: date | None = None
    has_stock_inbound_reserve: bool = False

    @field_validator(
        "event_date", "stock_inbound_date", "stock_outbound_date", mode="before"
    )
    @classmethod
    def _calendar_date_only(cls, value: Any) -> Any:
        # Numbers would otherwise be coerced as unix timestamps.
        if isinstance(value, (bool, int, float)):
            raise ValueError(
                f"expected a date or an ISO 8601 date string, got {value!r}"
            )
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value).date()
            except ValueError:
                return value
        return value

    @model_validator(mode="after")
    def _stock_dates_ordered(self) -> DeadlineInput:
        inbound, outbound = self.stock_inbound_date, self.stock_outbound_date
        if inbound is not None and outbound is not None and outbound < inbound:
            raise ValueError(
                f"stock_outbound_date {outbound} is before stock_inbound_date {inbound}"
            )
        return self


class DeadlineResult(BaseModel):
    """Deadlines computed for a single claim."""

    model_config = ConfigDict(frozen=True)

    reserve_deadline: date | None = None
    prescription_deadline: date
    is_decadence: bool = False
    sit_warning: str | None = None


class DeadlineNotice(BaseModel):
    """A deadline that has entered its notification window."""

    model_config = ConfigDict(frozen=True)

    kind: DeadlineKind
    deadline: date
    days_remaining: int
    urgency: DeadlineUrgency
