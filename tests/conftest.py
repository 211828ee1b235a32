from __future__ import annotations

import copy
import json

import httpx
import pytest

from windview.adapters.weather import WeatherFetcher


LONDON = {
    "coord": {"lon": -0.13, "lat": 51.51},
    "weather": [
        {"id": 300, "main": "Drizzle", "description": "light intensity drizzle", "icon": "09d"},
        {"id": 701, "main": "Mist", "description": "mist", "icon": "50d"},
    ],
    "base": "stations",
    "main": {
        "temp": 280.32,
        "pressure": 1012,
        "humidity": 81,
        "temp_min": 279.15,
        "temp_max": 281.15,
    },
    "visibility": 10000,
    "wind": {"speed": 4.1, "deg": 280},
    "clouds": {"all": 90},
    "dt": 1485789600,
    "sys": {
        "type": 1,
        "id": 5091,
        "message": 0.0103,
        "country": "GB",
        "sunrise": 1485762037,
        "sunset": 1485794875,
    },
    "id": 2643743,
    "name": "London",
    "cod": 200,
}


@pytest.fixture
def london_payload() -> dict:
    return copy.deepcopy(LONDON)


@pytest.fixture
def london_bytes(london_payload) -> bytes:
    return json.dumps(london_payload).encode("utf-8")


class Recorder:
    """httpx.MockTransport handler replaying queued responses or errors."""

    def __init__(self, *outcomes) -> None:
        self.outcomes = list(outcomes)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def make_fetcher():
    """Build a fetcher whose transport answers with the given outcomes in turn."""

    def _make(*outcomes):
        recorder = Recorder(*outcomes)
        return WeatherFetcher(transport=httpx.MockTransport(recorder)), recorder

    return _make
