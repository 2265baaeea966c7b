from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from weather_cli.core.errors import (
    ConfigError,
    HttpStatusError,
    NetworkError,
    UrlConstructionError,
)
from weather_cli.schemas.weather import WeatherReport

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    """
    OpenWeatherMap current-weather client.

    Endpoint used:
    - Current weather by city: /weather?q={city},{country}&units=metric&appid={key}

    One GET per `fetch`, bounded by `timeout_s`, never retried.
    """

    BASE = "https://api.openweathermap.org/data/2.5"

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout_s: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not api_key or not api_key.strip():
            raise ConfigError("API_KEY is not configured")
        self.api_key = api_key
        self.base_url = (base_url or self.BASE).rstrip("/")
        self.timeout = timeout_s
        self.transport = transport

    def build_url(self, city: str, country_code: str) -> httpx.URL:
        # City and country are passed through untouched; httpx percent-encodes them.
        try:
            url = httpx.URL(
                f"{self.base_url}/weather",
                params={
                    "q": f"{city},{country_code}",
                    "units": "metric",
                    "appid": self.api_key,
                },
            )
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise UrlConstructionError(f"cannot build request URL: {e}") from e

        if url.scheme not in ("http", "https") or not url.host:
            raise UrlConstructionError(f"request URL is not absolute http(s): {self.base_url}/weather")
        return url

    async def fetch(self, city: str, country_code: str) -> WeatherReport:
        url = self.build_url(city, country_code)
        logger.debug("GET %s", url.copy_set_param("appid", "***"))

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                r = await client.get(url, headers={"accept": "application/json"})
            except httpx.TimeoutException as e:
                raise NetworkError(f"request timed out after {self.timeout}s") from e
            except httpx.RequestError as e:
                raise NetworkError(f"request failed: {e}") from e

        logger.debug("response status %s (%d bytes)", r.status_code, len(r.content))

        if r.is_error:
            raise HttpStatusError(r.status_code, self._error_message(r))

        return WeatherReport.from_json(r.content)

    @staticmethod
    def _error_message(r: httpx.Response) -> Optional[str]:
        """
        Error bodies typically look like {"cod": "401", "message": "Invalid API key..."}.
        """
        try:
            body: Any = r.json()
        except ValueError:
            return None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return None


async def fetch_weather(
    city: str,
    country_code: str,
    api_key: str,
    **client_options: Any,
) -> WeatherReport:
    """
    Fetch the current weather for `city`, `country_code` in one call.

    Raises:
        ConfigError: empty `api_key`, before any request is made.
        UrlConstructionError, NetworkError, DecodeError: see `OpenWeatherClient.fetch`.
    """
    client = OpenWeatherClient(api_key, **client_options)
    return await client.fetch(city, country_code)
