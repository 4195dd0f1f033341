"""Core type definitions shared across all claimtrack modules."""

from __future__ import annotations

from enum import StrEnum


class ClaimCategory(StrEnum):
    """Transport/loss category of a claim; selects the legal rule set."""

    TERRESTRIAL = "TERRESTRIAL"
    AIR = "AIR"
    MARITIME = "MARITIME"
    RAIL = "RAIL"
    STOCK_IN_TRANSIT = "STOCK_IN_TRANSIT"


class JurisdictionScope(StrEnum):
    """Whether the carriage was domestic or crossed a border."""

    NATIONAL = "NATIONAL"
    INTERNATIONAL = "INTERNATIONAL"


class DeadlineKind(StrEnum):
    """The legal deadlines computed for a claim."""

    RESERVE = "reserve"
    PRESCRIPTION = "prescription"


class DeadlineUrgency(StrEnum):
    """Status of a deadline relative to a reference day."""

    NONE = "none"
    OK = "ok"
    URGENT = "urgent"
    EXPIRED = "expired"
