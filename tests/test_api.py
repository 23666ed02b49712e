"""
Tests for the weather lookup API.
"""

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from conftest import FakeProvider, ok
from weather_lookup.api.app import app
from weather_lookup.api.dependencies import get_handler
from weather_lookup.handlers import WeatherHandler
from weather_lookup.services import ForecastFetcher, IpResolver, UnknownLocationError, WeatherPipeline, ZipResolver


@pytest.fixture
def providers(forecast_payload):
    return {
        "ip": FakeProvider(ok({"city": "Berlin"})),
        "zip": FakeProvider(ok({"results": {}})),
        "weather": FakeProvider(ok(forecast_payload)),
    }


@pytest.fixture
def client(store, clock, providers):
    """Create a test client wired to an in-memory store and fake providers."""
    pipeline = WeatherPipeline(
        cache=store,
        ip_resolver=IpResolver(cache=store, provider=providers["ip"]),
        zip_resolver=ZipResolver(cache=store, provider=providers["zip"]),
        forecast_fetcher=ForecastFetcher(provider=providers["weather"]),
        clock=clock,
    )
    app.dependency_overrides[get_handler] = lambda: WeatherHandler(pipeline=pipeline, cache=store)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Weather Lookup API"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "cache_healthy": True}


def test_weather_by_location(client, providers):
    first = client.get("/weather", params={"location": "TestCity"})
    second = client.get("/weather", params={"location": "TestCity"})

    assert first.status_code == 200
    data = first.json()
    assert data["query"] == "TestCity"
    assert data["from_cache"] is False
    assert data["weather"]["city"] == "TestCity"
    assert data["weather"]["forecast_day"]["high_c"] == 25
    assert [h["time"] for h in data["weather"]["hourly"]] == ["10:00", "12:00"]

    assert second.json()["from_cache"] is True
    assert providers["weather"].calls == ["TestCity"]


def test_weather_falls_back_to_client_ip(client, providers):
    response = client.get("/weather")

    # TestClient connects from "testclient", which is not IP-shaped
    assert response.status_code == 200
    assert response.json()["query"] == "testclient"
    assert providers["ip"].calls == []


def test_weather_without_data(client, providers):
    providers["zip"]._outcomes = [ok({"results": []})]

    response = client.get("/weather", params={"location": "12345"})

    assert response.status_code == 200
    assert response.json()["weather"] is None


class FailingPipeline:
    def __init__(self, error: Exception) -> None:
        self._error = error

    def get_weather(self, raw_input):
        raise self._error


def test_unknown_location_maps_to_404(store):
    handler = WeatherHandler(pipeline=FailingPipeline(UnknownLocationError("  ")), cache=store)

    with pytest.raises(HTTPException) as exc_info:
        handler.get_weather("  ", client_ip=None)

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "Could not resolve '  '"


def test_unexpected_error_returns_500(store):
    handler = WeatherHandler(pipeline=FailingPipeline(RuntimeError("boom")), cache=store)
    app.dependency_overrides[get_handler] = lambda: handler
    try:
        response = TestClient(app).get("/weather", params={"location": "BoomTown"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json()["detail"] == "Weather error: boom"
