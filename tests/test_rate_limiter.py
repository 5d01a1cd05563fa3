from __future__ import annotations

import time

import httpx
import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from skynote.app import create_app
from skynote.core import rate_limiter
from skynote.core.config import get_settings
from skynote.services.weather_service import WeatherService

PAYLOAD = {
    "name": "Quito",
    "weather": [{"main": "Clouds", "description": "overcast clouds"}],
    "main": {"temp": 14.0},
}


def _client_app(memory_backend, monkeypatch, *, trust: bool):
    monkeypatch.setenv("WEATHER_RATE_LIMIT", "2")
    monkeypatch.setenv("TRUST_FORWARDED_FOR", "1" if trust else "0")
    get_settings.cache_clear()
    settings = get_settings()
    svc = WeatherService(settings, transport=httpx.MockTransport(lambda r: httpx.Response(200, json=PAYLOAD)))
    return create_app(settings, backend=memory_backend, weather_service=svc)


def test_spoofed_forwarded_for_does_not_reset_quota(memory_backend, monkeypatch):
    app = _client_app(memory_backend, monkeypatch, trust=False)
    with TestClient(app) as client:
        codes = [
            client.get("/weather", params={"city": "Quito"}, headers={"X-Forwarded-For": f"10.0.0.{i}"}).status_code
            for i in range(3)
        ]
    assert codes == [200, 200, 429]


def test_forwarded_for_used_behind_trusted_proxy(memory_backend, monkeypatch):
    app = _client_app(memory_backend, monkeypatch, trust=True)
    with TestClient(app) as client:
        codes = [
            client.get("/weather", params={"city": "Quito"}, headers={"X-Forwarded-For": f"10.0.0.{i}, 172.16.0.1"}).status_code
            for i in range(3)
        ]
    assert codes == [200, 200, 200]


def test_expired_windows_are_dropped(monkeypatch):
    now = [1000.0]
    monkeypatch.setattr(rate_limiter.time, "time", lambda: now[0])
    for i in range(5):
        rate_limiter._limiter.check(f"weather:client-{i}", limit=3, window_seconds=60)
    assert rate_limiter.tracked_clients() == 5

    now[0] += 61
    rate_limiter._limiter.check("weather:late", limit=3, window_seconds=60)
    assert rate_limiter.tracked_clients() == 1


def test_window_reopens_after_expiry(monkeypatch):
    now = [time.time()]
    monkeypatch.setattr(rate_limiter.time, "time", lambda: now[0])
    rate_limiter._limiter.check("weather:a", limit=1, window_seconds=60)
    with pytest.raises(HTTPException) as exc_info:
        rate_limiter._limiter.check("weather:a", limit=1, window_seconds=60)
    assert exc_info.value.status_code == 429
    now[0] += 61
    rate_limiter._limiter.check("weather:a", limit=1, window_seconds=60)
