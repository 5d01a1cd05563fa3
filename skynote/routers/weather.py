from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request

from skynote.core.config import get_settings
from skynote.core.errors import CityNotFound, InvalidInput, MalformedResponse, WeatherLookupError
from skynote.core.rate_limiter import rate_limit_ip
from skynote.domain.weather import WeatherReport, advise
from skynote.services.weather_service import WeatherService

router = APIRouter(prefix="/weather", tags=["weather"])


def _get_weather_service(request: Request) -> WeatherService:
    svc = getattr(getattr(request.app, "state", None), "weather_service", None)
    if not svc:
        raise RuntimeError("WeatherService not configured")
    return svc


def _limit(request: Request) -> None:
    settings = getattr(request.app.state, "settings", None) or get_settings()
    rate_limit_ip(
        request,
        "weather",
        limit=settings.weather_rate_limit,
        window_seconds=60,
        trust_forwarded_for=settings.trust_forwarded_for,
    )


async def _report(call) -> dict:
    try:
        report: WeatherReport = await call
    except InvalidInput as exc:
        raise HTTPException(422, exc.message)
    except CityNotFound as exc:
        raise HTTPException(404, str(exc))
    except (WeatherLookupError, MalformedResponse) as exc:
        raise HTTPException(502, str(exc))
    return report.to_dict()


@router.get("")
async def weather_by_city(request: Request, city: str = ""):
    _limit(request)
    return await _report(_get_weather_service(request).by_city(city))


@router.get("/coordinates")
async def weather_by_coordinates(
    request: Request,
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
):
    _limit(request)
    return await _report(_get_weather_service(request).by_coordinates(lat, lon))


@router.get("/advice")
def weather_advice(condition: str = "", temperature: float = Query(...)):
    return {"advisory": advise(condition, temperature)}
