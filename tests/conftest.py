from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import pytest

# Garante que o pacote skynote seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from skynote.core import config as core_config  # noqa: E402
from skynote.core.errors import BackendUnavailable, BackendWriteFailure  # noqa: E402
from skynote.core.rate_limiter import reset_limits  # noqa: E402


class MemoryBackend:
    """In-memory KeyValueBackend with switchable failures."""

    def __init__(self, initial: Optional[dict] = None) -> None:
        self.values: dict[str, str] = dict(initial or {})
        self.fail_open = False
        self.fail_reads = False
        self.fail_writes = False
        self.writes = 0

    def open(self) -> None:
        if self.fail_open:
            raise BackendUnavailable("backend offline")

    def get_string(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise BackendUnavailable("read timed out")
        return self.values.get(key)

    def set_string(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise BackendWriteFailure("disk full")
        self.values[key] = value
        self.writes += 1


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def memory_backend():
    return MemoryBackend()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Isola cada teste de variáveis de ambiente e do rate limit global."""
    for name in (
        "STORAGE_BACKEND",
        "DATABASE_URL",
        "JSON_STORAGE_PATH",
        "REMINDERS_KEY",
        "WEATHER_RATE_LIMIT",
        "TRUST_FORWARDED_FOR",
    ):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    reset_limits()
    yield
    core_config.get_settings.cache_clear()
    reset_limits()
