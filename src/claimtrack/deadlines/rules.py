"""Legal rule matrix: reserve and prescription terms per category and scope."""

from __future__ import annotations

from enum import StrEnum
from typing import assert_never

from pydantic import BaseModel, ConfigDict

from claimtrack.core.types import ClaimCategory, JurisdictionScope


# Stock in transit beyond this many days may fall outside insurance coverage.
SIT_COVERAGE_THRESHOLD_DAYS = 60


class ReserveCounting(StrEnum):
    """How the reserve term is counted."""

    CALENDAR_DAYS = "calendar_days"
    BUSINESS_DAYS = "business_days"


class ReserveRule(BaseModel):
    """Term for filing a written reserve, counted from the event date."""

    model_config = ConfigDict(frozen=True)

    days: int
    counting: ReserveCounting = ReserveCounting.CALENDAR_DAYS
    roll_forward_sunday: bool = False


class PrescriptionRule(BaseModel):
    """Term after which the claim is time-barred (or forfeited, for decadence)."""

    model_config = ConfigDict(frozen=True)

    years: int = 0
    months: int = 0
    is_decadence: bool = False


class RuleSet(BaseModel):
    """Rules selected for one category/scope combination."""

    model_config = ConfigDict(frozen=True)

    category: ClaimCategory
    scope: JurisdictionScope
    reserve: ReserveRule
    prescription: PrescriptionRule


# Reserve terms
_EIGHT_DAYS_SUNDAY_ROLLOVER = ReserveRule(days=8, roll_forward_sunday=True)
_SEVEN_BUSINESS_DAYS = ReserveRule(days=7, counting=ReserveCounting.BUSINESS_DAYS)
_FOURTEEN_DAYS = ReserveRule(days=14)
_THREE_DAYS_SUNDAY_ROLLOVER = ReserveRule(days=3, roll_forward_sunday=True)
_SEVEN_DAYS = ReserveRule(days=7)

# Prescription / decadence terms
_SIX_MONTHS = PrescriptionRule(months=6)
_ONE_YEAR = PrescriptionRule(years=1)
_ONE_YEAR_DECADENCE = PrescriptionRule(years=1, is_decadence=True)
_TWO_YEARS_DECADENCE = PrescriptionRule(years=2, is_decadence=True)
_THREE_YEARS = PrescriptionRule(years=3)  # CMR art. 32, wilful misconduct


def select_rules(
    category: ClaimCategory,
    scope: JurisdictionScope,
    has_gross_negligence: bool = False,
) -> RuleSet:
    """Return the reserve and prescription rules for a claim.

    Every (category, scope) pair is matched explicitly. A value outside the
    enumerations is a programming error and raises ``AssertionError``.
    """
    reserve: ReserveRule
    prescription: PrescriptionRule

    match (category, scope):
        case (ClaimCategory.TERRESTRIAL, JurisdictionScope.NATIONAL):
            reserve, prescription = _EIGHT_DAYS_SUNDAY_ROLLOVER, _ONE_YEAR
        case (ClaimCategory.TERRESTRIAL, JurisdictionScope.INTERNATIONAL):
            reserve = _SEVEN_BUSINESS_DAYS
            prescription = _THREE_YEARS if has_gross_negligence else _ONE_YEAR
        case (ClaimCategory.AIR, JurisdictionScope.NATIONAL | JurisdictionScope.INTERNATIONAL):
            reserve, prescription = _FOURTEEN_DAYS, _TWO_YEARS_DECADENCE
        case (ClaimCategory.MARITIME, JurisdictionScope.NATIONAL):
            reserve, prescription = _THREE_DAYS_SUNDAY_ROLLOVER, _SIX_MONTHS
        case (ClaimCategory.MARITIME, JurisdictionScope.INTERNATIONAL):
            reserve, prescription = _THREE_DAYS_SUNDAY_ROLLOVER, _ONE_YEAR_DECADENCE
        case (ClaimCategory.RAIL, JurisdictionScope.NATIONAL | JurisdictionScope.INTERNATIONAL):
            reserve, prescription = _SEVEN_DAYS, _ONE_YEAR
        case (
            ClaimCategory.STOCK_IN_TRANSIT,
            JurisdictionScope.NATIONAL | JurisdictionScope.INTERNATIONAL,
        ):
            reserve, prescription = _EIGHT_DAYS_SUNDAY_ROLLOVER, _ONE_YEAR
        case _:
            assert_never((category, scope))

    return RuleSet(
        category=category,
        scope=scope,
        reserve=reserve,
        prescription=prescription,
    )


def rule_matrix() -> list[RuleSet]:
    """All ordinary rule sets, one per category/scope pair."""
    return [
        select_rules(category, scope)
        for category in ClaimCategory
        for scope in JurisdictionScope
    ]
