# The module defines a weather tool backed by the wttr.in JSON API.
# Date: 2026-10-16
# Version: 0.1.0

import httpx
import urllib.parse
from datetime import date as Date
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional, Type
from .base_tool import BaseTool
from toolhub.core.config import get_settings
from toolhub.core.errors import ToolExecutionError
from toolhub.utils.logger import console


class WeatherInput(BaseModel):
    """
    Input model for the Weather tool.
    Attributes:
        location (str): City name or location to look up.
        date (Optional[date]): Day of the forecast. Current conditions when omitted.
    """
    location: str = Field(..., min_length=1, description="City name or location, e.g. 'London' or 'New York'.")
    date: Optional[Date] = Field(default=None, description="The day to get the forecast for, in YYYY-MM-DD format. Omit for current conditions.")


def _first_value(entries: Any, default: str = "") -> str:
    """wttr.in wraps most strings as [{"value": ...}]."""
    if isinstance(entries, list) and entries and isinstance(entries[0], dict):
        return entries[0].get("value", default)
    return default


class WeatherTool(BaseTool):
    """
    Looks up current conditions or a short forecast for a location.
    The model calls it as 'get_weather_on_date'; it is registered as 'weather'.
    """
    name: str = "get_weather_on_date"
    description: str = "Gets the current weather, or the forecast for a given date within the next few days, for a location."
    args_schema: Type[BaseModel] = WeatherInput

    async def run(self, location: str, date: Optional[Date] = None) -> str:
        console.info(f"Executing tool '{self.name}'", {"location": location, "date": date})
        data = await self._fetch(location)

        area_name = location
        areas = data.get("nearest_area") or []
        if areas:
            area_name = _first_value(areas[0].get("areaName"), location)

        if date is None:
            return self._format_current(area_name, data)
        return self._format_forecast(area_name, date, data)

    async def _fetch(self, location: str) -> Dict[str, Any]:
        settings = get_settings()
        url = f"{settings.WEATHER_API_BASE_URL.rstrip('/')}/{urllib.parse.quote(location)}"
        try:
            async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS) as client:
                response = await client.get(url, params={"format": "j1"},
                                            headers={"User-Agent": "toolhub/0.1"})
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException as e:
            raise ToolExecutionError(f"Weather service timed out for '{location}'.") from e
        except httpx.HTTPStatusError as e:
            raise ToolExecutionError(
                f"Weather service returned {e.response.status_code} for '{location}'."
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise ToolExecutionError(f"Could not get weather for '{location}': {e}") from e

    @staticmethod
    def _format_current(area_name: str, data: Dict[str, Any]) -> str:
        conditions = data.get("current_condition") or []
        if not conditions:
            raise ToolExecutionError(f"No current weather available for '{area_name}'.")
        current = conditions[0]
        return (
            f"Current weather in {area_name}: {_first_value(current.get('weatherDesc'), 'unknown')}, "
            f"{current.get('temp_C', '?')}°C (feels like {current.get('FeelsLikeC', '?')}°C), "
            f"humidity {current.get('humidity', '?')}%, wind {current.get('windspeedKmph', '?')} km/h."
        )

    @staticmethod
    def _format_forecast(area_name: str, day: Date, data: Dict[str, Any]) -> str:
        wanted = day.isoformat()
        forecasts = data.get("weather") or []
        for forecast in forecasts:
            if forecast.get("date") != wanted:
                continue
            hourly = forecast.get("hourly") or []
            # Entries are three-hourly; the middle one is around midday.
            summary = _first_value(hourly[len(hourly) // 2].get("weatherDesc"), "unknown") if hourly else "unknown"
            return (
                f"Forecast for {area_name} on {wanted}: {summary}, "
                f"high {forecast.get('maxtempC', '?')}°C, low {forecast.get('mintempC', '?')}°C."
            )
        available = ", ".join(f.get("date", "?") for f in forecasts) or "none"
        raise ToolExecutionError(
            f"No forecast available for {wanted} in {area_name}. Available dates: {available}."
        )
