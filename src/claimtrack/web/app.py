"""FastAPI application exposing the claimtrack deadline engine."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from pydantic import BaseModel

from claimtrack.core.config import Settings
from claimtrack.deadlines.engine import DeadlineEngine
from claimtrack.deadlines.holidays import HolidayCalendar, default_calendar
from claimtrack.web.deadline_router import router as deadline_router


# --- Request/Response models ---


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str = "0.1.0"


# --- Application factory ---


def create_app(
    settings: Settings | None = None,
    deadline_engine: DeadlineEngine | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Uses the factory pattern so tests can create isolated app instances
    with their own engine.

    Args:
        settings: Application settings. Defaults to Settings().
        deadline_engine: Optional pre-built DeadlineEngine.

    Returns:
        A configured FastAPI instance.
    """
    if settings is None:
        settings = Settings()

    logging.getLogger("claimtrack").setLevel(settings.log_level.upper())

    app = FastAPI(
        title="claimtrack",
        description="Legal deadline calculation for transport claims",
        version="0.1.0",
        debug=settings.debug,
    )

    if deadline_engine is None:
        if settings.deadline.holidays_path:
            calendar = HolidayCalendar(settings.deadline.holidays_path)
        else:
            calendar = default_calendar()
        deadline_engine = DeadlineEngine(calendar=calendar)

    # Store on app state for access in route handlers
    app.state.settings = settings
    app.state.deadline_engine = deadline_engine
    app.state.deadline_config = settings.deadline

    app.include_router(deadline_router)

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            service="claimtrack-deadlines",
        )

    return app
