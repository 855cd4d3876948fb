import pytest
from fastapi.testclient import TestClient

from inflation_dash.models import ExternalReadingSet
from inflation_dash.services.refresh import RefreshController
from inflation_dash.web.server import create_app

from conftest import FakeProvider


@pytest.fixture
def provider():
    return FakeProvider(ExternalReadingSet(commodity_prices={"Rice (Foreign, 50kg)": 90000}))


@pytest.fixture
def client(state, provider):
    ctl = RefreshController(provider, state)
    return TestClient(create_app(state, ctl, provider))


def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_dashboard_snapshot(client):
    body = client.get("/api/dashboard").json()
    assert body["model"] == "ARIMA"
    assert len(body["history"]) == 16
    assert len(body["forecast"]) == 6
    assert body["forecast"][0]["period"] == "2025-01"
    assert body["commodities"][0]["name"] == "Rice (Foreign, 50kg)"
    assert body["refresh"]["phase"] == "idle"


def test_forecast_endpoint(client):
    body = client.get("/api/forecast", params={"model": "sarima", "horizon": 3}).json()
    assert body["model"] == "SARIMA"
    assert [p["period"] for p in body["points"]] == ["2025-01", "2025-02", "2025-03"]
    for p in body["points"]:
        assert p["lower_bound"] <= p["value"] <= p["upper_bound"]


def test_forecast_rejects_bad_input(client):
    assert client.get("/api/forecast", params={"model": "prophet"}).status_code == 400
    assert client.get("/api/forecast", params={"horizon": 0}).status_code == 422


def test_model_switch_and_toggle(client, state):
    body = client.post("/api/model", json={"model": "Holt-Winters", "show_forecast": False}).json()
    assert body["model"] == "Holt-Winters"
    assert body["forecast"] == []
    assert state.show_forecast is False
    assert client.post("/api/model", json={"model": "nope"}).status_code == 400


def test_refresh_applies_live_data(client, state):
    body = client.post("/api/refresh").json()
    assert body["outcome"] == "applied"
    assert body["last_updated"] is not None
    assert state.commodities[0].current_price == 90000
    assert state.commodities[0].trend == "down"

    body = client.post("/api/refresh").json()
    assert body["outcome"] == "empty"


def test_analysis_returns_tagged_lines(client):
    body = client.post("/api/analysis").json()
    assert body["model"] == "ARIMA"
    assert body["lines"][0] == {"kind": "header", "text": "Current Status"}
    assert body["lines"][-1]["kind"] == "bullet"


def test_calculator(client):
    body = client.post("/api/calculator", json={"salary": 133000, "location": "Kano"}).json()
    assert body["real_value"] == 100000.0
    assert body["loss"] == 33000.0
    assert "Kano" in body["tips"]


def test_calculator_validation(client):
    assert client.post("/api/calculator", json={"salary": -5}).status_code == 400
    assert client.post("/api/calculator", json={"salary": 1000, "location": "Paris"}).status_code == 400
    body = client.post("/api/calculator", json={"salary": 1000, "include_tips": False}).json()
    assert body["tips"] is None
