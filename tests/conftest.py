from datetime import timezone

import httpx
import pytest

from skyview.config import Settings
from skyview.services import WeatherFetcher

DAY0 = 1_700_006_400  # 2023-11-15 00:00 UTC


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(api_base_url="https://weather.test/data/2.5", api_key="test-key", timeout=1.0)


def current_body(name="London", temp=15.0, humidity=70, description="clear sky", speed=3.5):
    return {
        "name": name,
        "main": {"temp": temp, "humidity": humidity, "pressure": 1012},
        "weather": [{"id": 800, "description": description}],
        "wind": {"speed": speed, "deg": 200},
    }


def forecast_item(index, temp=None):
    t = float(index) if temp is None else temp
    return {
        "dt": DAY0 + index * 3 * 3600,
        "main": {"temp": t, "temp_min": t - 2, "temp_max": t + 2},
        "weather": [{"description": f"sample {index}"}],
    }


def forecast_body(count=40, first_temp=None):
    items = [forecast_item(i) for i in range(count)]
    if first_temp is not None and items:
        items[0] = forecast_item(0, first_temp)
    return {"cod": "200", "cnt": count, "list": items}


class FakeUpstream:
    """Routes /weather and /forecast to canned responses and records every request."""

    def __init__(self, current=None, forecast=None, current_status=200, forecast_status=200):
        self.current = current if current is not None else current_body()
        self.forecast = forecast if forecast is not None else forecast_body()
        self.current_status = current_status
        self.forecast_status = forecast_status
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/weather"):
            return self._respond(self.current_status, self.current)
        if request.url.path.endswith("/forecast"):
            return self._respond(self.forecast_status, self.forecast)
        return httpx.Response(404, json={"message": "not found"})

    def _respond(self, status, body):
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    def fetcher(self, settings):
        return WeatherFetcher(settings=settings, transport=httpx.MockTransport(self.handler), tz=timezone.utc)


@pytest.fixture
def upstream():
    return FakeUpstream()
