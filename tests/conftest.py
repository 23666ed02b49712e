"""Shared fixtures: a controllable clock, an in-memory store and fake providers."""

import copy

import pytest

from weather_lookup.entities import ProviderError, ProviderResult
from weather_lookup.repositories import InMemoryCacheStore


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeProvider:
    """Replays queued outcomes for lookup/search/forecast and records the arguments.

    Each outcome is either a ProviderResult or an exception instance to raise.
    The last outcome is repeated once the queue is exhausted.
    """

    def __init__(self, *outcomes) -> None:
        self._outcomes = list(outcomes)
        self.calls: list[str] = []

    def _next(self, arg: str) -> ProviderResult:
        self.calls.append(arg)
        outcome = self._outcomes.pop(0) if len(self._outcomes) > 1 else self._outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def lookup(self, ip: str) -> ProviderResult:
        return self._next(ip)

    def search(self, code: str) -> ProviderResult:
        return self._next(code)

    def forecast(self, query: str) -> ProviderResult:
        return self._next(query)


def ok(payload: dict) -> ProviderResult:
    return ProviderResult.success(payload)


def http_error(code: int = 500) -> ProviderResult:
    return ProviderResult.failure(ProviderError.HTTP_STATUS, f"HTTP error {code}: Server Error", status_code=code)


FORECAST_PAYLOAD = {
    "location": {
        "name": "TestCity",
        "country": "TestLand",
        "localtime": "2025-05-08 10:00",
    },
    "current": {
        "temp_c": 22,
        "condition": {"text": "Sunny", "icon": "icon_url"},
    },
    "forecast": {
        "forecastday": [
            {
                "date": "2025-05-08",
                "day": {
                    "maxtemp_c": 25,
                    "mintemp_c": 15,
                    "condition": {"text": "Clear", "icon": "icon2"},
                },
                "hour": [
                    {"time": "2025-05-08 10:00", "temp_c": 22, "condition": {"text": "Sunny", "icon": "icon_url"}},
                    {"time": "2025-05-08 12:00", "temp_c": 24, "condition": {"text": "Hot", "icon": "icon3"}},
                    # 24h later, outside the window
                    {"time": "2025-05-09 10:00", "temp_c": 18, "condition": {"text": "Cool", "icon": "icon4"}},
                ],
            }
        ]
    },
}


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return InMemoryCacheStore(clock=clock)


@pytest.fixture
def forecast_payload():
    return copy.deepcopy(FORECAST_PAYLOAD)
