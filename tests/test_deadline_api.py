"""Tests for the deadline API router."""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from claimtrack.core.config import DeadlineConfig, Settings
from claimtrack.web.app import create_app

from tests.conftest import write_holidays


@pytest.fixture
def app():
    return create_app(settings=Settings())


@pytest.fixture
def client(app):
    return TestClient(app)


class TestCalculateEndpoint:
    def test_terrestrial_national_sunday_rollover(self, client):
        resp = client.post("/api/deadlines/calculate", json={
            "event_date": "2026-01-10",
            "category": "TERRESTRIAL",
            "scope": "NATIONAL",
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["reserve_deadline"] == "2026-01-19"
        assert data["prescription_deadline"] == "2027-01-10"
        assert data["is_decadence"] is False
        assert data["sit_warning"] is None
        assert "reserve_status" not in data

    def test_gross_negligence(self, client):
        resp = client.post("/api/deadlines/calculate", json={
            "event_date": "2026-01-01",
            "category": "TERRESTRIAL",
            "scope": "INTERNATIONAL",
            "has_gross_negligence": True,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["reserve_deadline"] == "2026-01-10"
        assert data["prescription_deadline"] == "2029-01-01"

    def test_air_decadence(self, client):
        resp = client.post("/api/deadlines/calculate", json={
            "event_date": "2026-01-01",
            "category": "AIR",
            "scope": "INTERNATIONAL",
        })
        assert resp.status_code == 200
        assert resp.json()["is_decadence"] is True

    def test_sit_warning(self, client):
        resp = client.post("/api/deadlines/calculate", json={
            "event_date": "2026-01-01",
            "category": "STOCK_IN_TRANSIT",
            "scope": "NATIONAL",
            "stock_inbound_date": "2026-01-01",
            "stock_outbound_date": "2026-03-10",
        })
        assert resp.status_code == 200
        assert "68 gg" in resp.json()["sit_warning"]

    def test_with_reference_day(self, client):
        resp = client.post(
            "/api/deadlines/calculate",
            params={"today": "2026-01-07"},
            json={
                "event_date": "2026-01-01",
                "category": "TERRESTRIAL",
                "scope": "INTERNATIONAL",
            },
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["reserve_status"] == "urgent"
        assert data["prescription_status"] == "ok"
        assert len(data["notices"]) == 1
        assert data["notices"][0]["kind"] == "reserve"
        assert data["notices"][0]["days_remaining"] == 3

    def test_unknown_category(self, client):
        resp = client.post("/api/deadlines/calculate", json={
            "event_date": "2026-01-01",
            "category": "BUS",
            "scope": "NATIONAL",
        })
        assert resp.status_code == 422

    def test_invalid_event_date(self, client):
        resp = client.post("/api/deadlines/calculate", json={
            "event_date": "2026-02-30",
            "category": "AIR",
            "scope": "NATIONAL",
        })
        assert resp.status_code == 422

    def test_stock_outbound_before_inbound(self, client):
        resp = client.post("/api/deadlines/calculate", json={
            "event_date": "2026-01-01",
            "category": "STOCK_IN_TRANSIT",
            "scope": "NATIONAL",
            "stock_inbound_date": "2026-03-10",
            "stock_outbound_date": "2026-01-01",
        })
        assert resp.status_code == 422

    def test_datetime_string_truncated(self, client):
        resp = client.post("/api/deadlines/calculate", json={
            "event_date": "2026-01-10T23:30:00",
            "category": "TERRESTRIAL",
            "scope": "NATIONAL",
        })
        assert resp.status_code == 200
        assert resp.json()["reserve_deadline"] == "2026-01-19"

    def test_missing_event_date(self, client):
        resp = client.post("/api/deadlines/calculate", json={
            "category": "AIR",
            "scope": "NATIONAL",
        })
        assert resp.status_code == 422

    def test_engine_not_available(self, app, client):
        app.state.deadline_engine = None
        resp = client.post("/api/deadlines/calculate", json={
            "event_date": "2026-01-01",
            "category": "AIR",
            "scope": "NATIONAL",
        })
        assert resp.status_code == 503


class TestRulesEndpoint:
    def test_list_rules(self, client):
        resp = client.get("/api/deadlines/rules")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == 10
        air = next(
            r for r in data if r["category"] == "AIR" and r["scope"] == "INTERNATIONAL"
        )
        assert air["reserve"]["days"] == 14
        assert air["prescription"]["years"] == 2
        assert air["prescription"]["is_decadence"] is True


class TestHolidaysEndpoint:
    def test_list_holidays(self, client):
        resp = client.get("/api/deadlines/holidays")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == 10
        assert data[0] == {"month_day": "01-01", "name": "Capodanno"}

    def test_configured_holidays_path(self, tmp_path):
        path = write_holidays(tmp_path / "holidays.yml", ["03-19"])
        settings = Settings(deadline=DeadlineConfig(holidays_path=str(path)))
        client = TestClient(create_app(settings=settings))
        resp = client.get("/api/deadlines/holidays")
        assert [h["month_day"] for h in resp.json()] == ["03-19"]


class TestLogging:
    def test_package_log_level_from_settings(self, monkeypatch):
        monkeypatch.setenv("CLAIMTRACK_LOG_LEVEL", "debug")
        create_app(settings=Settings())
        assert logging.getLogger("claimtrack").level == logging.DEBUG
        create_app(settings=Settings(log_level="WARNING"))
        assert logging.getLogger("claimtrack").level == logging.WARNING


class TestHealth:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"
