import copy
import json

import httpx
import pytest

from weather_cli.services.providers.openweather_client import OpenWeatherClient

LONDON_PAYLOAD = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [
        {"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}
    ],
    "base": "stations",
    "main": {
        "temp": 15.0,
        "feels_like": 14.0,
        "pressure": 1012,
        "humidity": 80,
        "temp_min": 13.89,
        "temp_max": 16.11,
    },
    "visibility": 10000,
    "wind": {"speed": 3.0, "deg": 90},
    "clouds": {"all": 75},
    "dt": 1600020000,
    "sys": {
        "type": 1,
        "id": 1414,
        "country": "GB",
        "sunrise": 1600000000,
        "sunset": 1600040000,
    },
    "id": 2643743,
    "name": "London",
    "cod": 200,
}


@pytest.fixture
def london_payload():
    """
    A complete current-weather response for London, GB.
    """
    return copy.deepcopy(LONDON_PAYLOAD)


@pytest.fixture
def make_client():
    """
    Return a factory building a client whose HTTP traffic goes to `handler`.

    Every request seen by the mock transport is appended to `client.requests`.
    """
    def factory(handler, api_key="test-key", **options):
        seen = []

        def recording(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        client = OpenWeatherClient(
            api_key,
            transport=httpx.MockTransport(recording),
            **options,
        )
        client.requests = seen
        return client

    return factory


@pytest.fixture
def json_response():
    """
    Build a provider response carrying `payload` as a JSON body.
    """
    def factory(payload, status_code=200) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload).encode())

    return factory


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """
    Keep the developer's API_KEY and .env file out of the tests.
    """
    for var in ("API_KEY", "OWM_BASE_URL", "REQUEST_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
