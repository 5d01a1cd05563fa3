from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from skynote.core.config import Settings, get_settings
from skynote.core.errors import BackendUnavailable
from skynote.core.logging_setup import configure_logging
from skynote.repositories import KeyValueBackend, build_backend
from skynote.routers import reminders as reminders_router
from skynote.routers import weather as weather_router
from skynote.services.reminder_store import ReminderStore
from skynote.services.weather_service import WeatherService

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (anti clickjacking, nosniff, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def _allowed_origins(settings: Settings) -> list[str]:
    allowed = {settings.public_base_url}
    if settings.app_env != "prod":
        allowed.update(
            {
                "http://localhost:8000",
                "http://127.0.0.1:8000",
                "http://localhost:5173",
                "http://127.0.0.1:5173",
            }
        )
    return sorted(origin for origin in allowed if origin)


def create_app(
    settings: Optional[Settings] = None,
    *,
    backend: Optional[KeyValueBackend] = None,
    weather_service: Optional[WeatherService] = None,
) -> FastAPI:
    """Factory compatible with uvicorn (``uvicorn skynote.app:create_app --factory``)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    store = ReminderStore(backend or build_backend(settings), key=settings.reminders_key)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            await store.initialize()
        except BackendUnavailable as exc:
            # serve weather anyway; reminder routes answer 503
            logger.error("Reminder storage disabled: %s", exc)
        yield

    app = FastAPI(title="skynote API", lifespan=lifespan)
    app.state.settings = settings
    app.state.reminder_store = store
    app.state.weather_service = weather_service or WeatherService(settings)

    origins = _allowed_origins(settings)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    @app.get("/health")
    def health():
        return {"ok": True, "reminders_ready": store.ready}

    app.include_router(reminders_router.router)
    app.include_router(weather_router.router)
    return app
