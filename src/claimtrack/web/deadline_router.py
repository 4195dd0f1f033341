"""Deadline API router: calculation, rule matrix, and holiday calendar."""

from __future__ import annotations

from datetime import date
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from claimtrack.core.config import DeadlineConfig
from claimtrack.deadlines.engine import DeadlineEngine
from claimtrack.deadlines.models import DeadlineInput
from claimtrack.deadlines.rules import rule_matrix
from claimtrack.deadlines.status import classify_deadline, due_notices


router = APIRouter()


# ---------------------------------------------------------------------------
# Helpers to get services from app state
# ---------------------------------------------------------------------------


def _get_deadline_engine(request: Request) -> DeadlineEngine:
    engine = getattr(request.app.state, "deadline_engine", None)
    if engine is None:
        raise HTTPException(status_code=503, detail="Deadline engine not available")
    return engine


def _get_deadline_config(request: Request) -> DeadlineConfig:
    config = getattr(request.app.state, "deadline_config", None)
    return config if config is not None else DeadlineConfig()


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.post("/api/deadlines/calculate")
async def api_calculate_deadlines(
    body: DeadlineInput, request: Request, today: date | None = None
) -> dict[str, Any]:
    """Compute the legal deadlines for a claim.

    When ``today`` is given, the response also carries the status of each
    deadline and the notices that are due.
    """
    engine = _get_deadline_engine(request)
    try:
        result = engine.calculate(body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    payload = result.model_dump(mode="json")
    if today is not None:
        config = _get_deadline_config(request)
        payload["reserve_status"] = classify_deadline(
            result.reserve_deadline, today, config.urgent_within_days
        ).value
        payload["prescription_status"] = classify_deadline(
            result.prescription_deadline, today, config.urgent_within_days
        ).value
        payload["notices"] = [
            notice.model_dump(mode="json")
            for notice in due_notices(
                result,
                today,
                reserve_days_before=config.notify_reserve_days_before,
                prescription_days_before=config.notify_prescription_days_before,
                urgent_within_days=config.urgent_within_days,
            )
        ]
    return payload


@router.get("/api/deadlines/rules")
async def api_list_rules() -> list[dict[str, Any]]:
    """List the ordinary rule set for every category and scope."""
    return [rules.model_dump(mode="json") for rules in rule_matrix()]


@router.get("/api/deadlines/holidays")
async def api_list_holidays(request: Request) -> list[dict[str, Any]]:
    """List the fixed national holidays used for business-day counting."""
    engine = _get_deadline_engine(request)
    return [holiday.model_dump() for holiday in engine.calendar.holidays]
