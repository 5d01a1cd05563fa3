"""
Configuration helpers for the skynote backend.

Exposes a frozen Settings object read from environment variables (storage
backend, database URL, upstream weather API, rate limits, logging) so that
routers/services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT_DIR = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    public_base_url: str
    storage_backend: str
    database_url: str
    json_storage_path: Path
    reminders_key: str
    openweather_api_key: str
    openweather_base_url: str
    weather_timeout_seconds: float
    weather_rate_limit: int
    trust_forwarded_for: bool
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _float(value: str, default: float = 0.0) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    storage = (os.getenv("STORAGE_BACKEND") or "sql").strip().lower()
    if storage not in {"sql", "json"}:
        storage = "sql"

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        public_base_url=os.getenv("PUBLIC_BASE_URL", "http://localhost:8000").rstrip("/"),
        storage_backend=storage,
        database_url=os.getenv("DATABASE_URL", "sqlite:///skynote.db"),
        json_storage_path=Path(os.getenv("JSON_STORAGE_PATH") or ROOT_DIR / "data.json"),
        reminders_key=os.getenv("REMINDERS_KEY") or "reminders",
        openweather_api_key=os.getenv("OPENWEATHER_API_KEY", ""),
        openweather_base_url=os.getenv(
            "OPENWEATHER_BASE_URL", "https://api.openweathermap.org/data/2.5/weather"
        ),
        weather_timeout_seconds=_float(os.getenv("WEATHER_TIMEOUT_SECONDS", "10"), 10.0),
        weather_rate_limit=_int(os.getenv("WEATHER_RATE_LIMIT", "30"), 30),
        trust_forwarded_for=_bool(os.getenv("TRUST_FORWARDED_FOR"), False),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
