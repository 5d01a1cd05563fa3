from __future__ import annotations

import pytest

from skynote.core.errors import MalformedResponse
from skynote.domain import weather
from skynote.domain.weather import advise, capitalize, parse_weather_payload, weather_icon


def test_thunderstorm_beats_cold_temperature():
    assert advise("Thunderstorm", 5) == weather.THUNDERSTORM_ADVICE


def test_heat_beats_clear_label():
    assert advise("Clear", 35) == weather.HEAT_ADVICE


def test_cloudy_day():
    assert advise("Clouds", 20) == weather.CLOUDS_ADVICE


def test_mist_is_low_visibility():
    assert advise("Mist", 15) == weather.LOW_VISIBILITY_ADVICE


def test_unknown_label_falls_back():
    assert advise("Tornado", 20) == weather.DEFAULT_ADVICE


@pytest.mark.parametrize(
    "label, temperature, expected",
    [
        ("light rain", 35, weather.RAIN_ADVICE),
        ("DRIZZLE", 0, weather.RAIN_ADVICE),
        ("Snow", 40, weather.SNOW_ADVICE),
        ("thunderstorm with rain", 20, weather.THUNDERSTORM_ADVICE),
        ("Clouds", 2, weather.COLD_ADVICE),
        ("Fog", 12, weather.LOW_VISIBILITY_ADVICE),
        ("haze", 25, weather.LOW_VISIBILITY_ADVICE),
        ("clear sky", 22.5, weather.CLEAR_ADVICE),
    ],
)
def test_rule_order(label, temperature, expected):
    assert advise(label, temperature) == expected


def test_thresholds_are_strict():
    assert advise("Clear", 30) == weather.CLEAR_ADVICE
    assert advise("Clear", 30.1) == weather.HEAT_ADVICE
    assert advise("Clouds", 10) == weather.CLOUDS_ADVICE
    assert advise("Clouds", 9.9) == weather.COLD_ADVICE


def test_weather_icon_mapping():
    assert weather_icon("Clear") == "sunny"
    assert weather_icon("drizzle") == "cloudy_snowing"
    assert weather_icon("Haze") == "blur_on"
    assert weather_icon("Tornado") == weather.DEFAULT_ICON
    assert weather_icon(None) == weather.DEFAULT_ICON


def test_capitalize():
    assert capitalize("broken CLOUDS") == "Broken clouds"
    assert capitalize("") == ""


def _payload(**overrides):
    data = {
        "name": "Lisbon",
        "weather": [{"main": "Clouds", "description": "scattered clouds"}],
        "main": {"temp": 21.44},
    }
    data.update(overrides)
    return data


def test_parse_weather_payload():
    report = parse_weather_payload(_payload())
    assert report.city == "Lisbon"
    assert report.condition == "Clouds"
    assert report.temperature == pytest.approx(21.44)
    assert report.advisory == weather.CLOUDS_ADVICE
    body = report.to_dict()
    assert body["description"] == "Scattered clouds"
    assert body["temperature_display"] == "21.4 °C"
    assert body["icon"] == "cloud"


def test_parse_accepts_integer_temperature():
    assert parse_weather_payload(_payload(main={"temp": 31})).temperature == 31.0


@pytest.mark.parametrize(
    "payload",
    [
        [],
        _payload(name=None),
        _payload(weather=[]),
        _payload(weather=[{"main": "Clouds"}]),
        _payload(main={}),
        _payload(main={"temp": "hot"}),
        _payload(main={"temp": True}),
    ],
)
def test_parse_rejects_incomplete_payloads(payload):
    with pytest.raises(MalformedResponse):
        parse_weather_payload(payload)


def test_parse_accepts_empty_city_name():
    report = parse_weather_payload(_payload(name=""))
    assert report.city == weather.UNKNOWN_CITY
    assert report.advisory == weather.CLOUDS_ADVICE
