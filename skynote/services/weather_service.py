"""Weather lookups against an OpenWeatherMap-compatible API."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from skynote.core.config import Settings, get_settings
from skynote.core.errors import CityNotFound, InvalidInput, WeatherLookupError
from skynote.domain.weather import WeatherReport, parse_weather_payload

logger = logging.getLogger(__name__)


class WeatherService:
    """Fetches current conditions by city name or coordinates."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=float(self.settings.weather_timeout_seconds),
            transport=self._transport,
        )

    async def by_city(self, city: Optional[str]) -> WeatherReport:
        name = (city or "").strip()
        if not name:
            raise InvalidInput("Please enter a city name.")
        return await self._fetch({"q": name})

    async def by_coordinates(self, lat: float, lon: float) -> WeatherReport:
        return await self._fetch({"lat": lat, "lon": lon})

    async def _fetch(self, query: dict[str, Any]) -> WeatherReport:
        params = dict(query, appid=self.settings.openweather_api_key, units="metric")
        try:
            async with self._client() as client:
                response = await client.get(self.settings.openweather_base_url, params=params)
        except httpx.HTTPError as exc:
            logger.warning("Weather API request failed: %s", exc)
            raise WeatherLookupError(f"Error fetching weather: {exc}") from exc

        if response.status_code == 404:
            raise CityNotFound("City not found. Please check the city name.")
        if response.status_code != 200:
            logger.warning("Weather API returned HTTP %s", response.status_code)
            raise WeatherLookupError(f"Failed to fetch weather data: HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as exc:
            raise WeatherLookupError("Weather API returned invalid JSON") from exc
        return parse_weather_payload(data)
