"""Weather report model, payload decoding and advisory rules."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from skynote.core.errors import MalformedResponse

THUNDERSTORM_ADVICE = "⚠️ Stay indoors! A thunderstorm is expected. Unplug electronics."
RAIN_ADVICE = "🌧️ Don't forget your umbrella and raincoat. Drive carefully."
SNOW_ADVICE = "❄️ Bundle up! It's snowing. Be careful on slippery surfaces."
HEAT_ADVICE = "☀️ It's a hot day! Stay hydrated, wear light clothes. Avoid peak sun hours."
COLD_ADVICE = "🥶 It's chilly! Wear warm clothes and a jacket."
CLEAR_ADVICE = "🌞 Enjoy the clear sky! Consider wearing sunglasses and sunscreen."
CLOUDS_ADVICE = "☁️ It's a cloudy day. Perfect for a walk, but keep an eye on the sky."
LOW_VISIBILITY_ADVICE = "🌫️ Limited visibility. Drive with caution and use fog lights."
DEFAULT_ADVICE = "Enjoy your day! Have a good one."

UNKNOWN_CITY = "Unknown City"

HOT_ABOVE_CELSIUS = 30
COLD_BELOW_CELSIUS = 10

DEFAULT_ICON = "wb_cloudy"
_ICONS = {
    "clear": "sunny",
    "clouds": "cloud",
    "rain": "cloudy_snowing",
    "drizzle": "cloudy_snowing",
    "thunderstorm": "flash_on",
    "snow": "ac_unit",
    "mist": "blur_on",
    "fog": "blur_on",
    "haze": "blur_on",
}


def advise(condition_label: str, temperature_celsius: float) -> str:
    """
    Return the advisory text for a condition label and a temperature.

    Rules are evaluated in order and the first match wins. Precipitation
    labels beat temperature, temperature beats the remaining labels, and the
    thresholds are strict (exactly 30 or 10 falls through to the label rules).
    """
    label = (condition_label or "").lower()
    if "thunderstorm" in label:
        return THUNDERSTORM_ADVICE
    if "rain" in label or "drizzle" in label:
        return RAIN_ADVICE
    if "snow" in label:
        return SNOW_ADVICE
    if temperature_celsius > HOT_ABOVE_CELSIUS:
        return HEAT_ADVICE
    if temperature_celsius < COLD_BELOW_CELSIUS:
        return COLD_ADVICE
    if "clear" in label:
        return CLEAR_ADVICE
    if "clouds" in label:
        return CLOUDS_ADVICE
    if "mist" in label or "fog" in label or "haze" in label:
        return LOW_VISIBILITY_ADVICE
    return DEFAULT_ADVICE


def weather_icon(condition_label: str | None) -> str:
    """Material icon name for a condition label (exact, case-insensitive)."""
    return _ICONS.get((condition_label or "").strip().lower(), DEFAULT_ICON)


def capitalize(text: str | None) -> str:
    if not text:
        return ""
    return text[0].upper() + text[1:].lower()


@dataclass(frozen=True)
class WeatherReport:
    city: str
    condition: str
    description: str
    temperature: float

    @property
    def advisory(self) -> str:
        return advise(self.condition, self.temperature)

    @property
    def icon(self) -> str:
        return weather_icon(self.condition)

    def to_dict(self) -> dict:
        return {
            "city": self.city,
            "condition": self.condition,
            "description": capitalize(self.description),
            "temperature": self.temperature,
            "temperature_display": f"{self.temperature:.1f} °C",
            "advisory": self.advisory,
            "icon": self.icon,
        }


def parse_weather_payload(data: Any) -> WeatherReport:
    """
    Validate an upstream weather payload and build a WeatherReport.

    Required: ``name`` (text, empty away from named places), a non-empty ``weather`` list whose first item
    has text ``main`` and ``description``, and a numeric ``main.temp``.
    Anything missing raises MalformedResponse instead of defaulting.
    """
    if not isinstance(data, Mapping):
        raise MalformedResponse("Weather payload must be a JSON object")

    city = data.get("name")
    if not isinstance(city, str):
        raise MalformedResponse("Weather payload is missing 'name'")

    conditions = data.get("weather")
    if not isinstance(conditions, list) or not conditions or not isinstance(conditions[0], Mapping):
        raise MalformedResponse("Weather payload is missing 'weather' conditions")
    label = conditions[0].get("main")
    description = conditions[0].get("description")
    if not isinstance(label, str) or not isinstance(description, str):
        raise MalformedResponse("Weather condition requires text 'main' and 'description'")

    main = data.get("main")
    temp = main.get("temp") if isinstance(main, Mapping) else None
    # bool is an int subclass but never a temperature
    if isinstance(temp, bool) or not isinstance(temp, (int, float)):
        raise MalformedResponse("Weather payload is missing numeric 'main.temp'")

    return WeatherReport(
        city=city.strip() or UNKNOWN_CITY,
        condition=label,
        description=description,
        temperature=float(temp),
    )
