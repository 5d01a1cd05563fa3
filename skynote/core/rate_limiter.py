"""Per-client quota for upstream weather lookups."""
from __future__ import annotations

import threading
import time
from typing import Dict, Tuple

from fastapi import HTTPException, Request


class _RateLimiter:
    """Fixed-window hit counter keyed by scope and client.

    Expired windows are dropped on every check, so the table only holds
    clients seen within the last window.
    """

    def __init__(self) -> None:
        self._hits: Dict[str, Tuple[int, float]] = {}
        self._lock = threading.Lock()

    def _prune(self, now: float) -> None:
        expired = [key for key, (_count, reset) in self._hits.items() if now > reset]
        for key in expired:
            del self._hits[key]

    def check(self, key: str, limit: int, window_seconds: int) -> None:
        if limit <= 0:
            return
        now = time.time()
        with self._lock:
            self._prune(now)
            count, reset = self._hits.get(key, (0, now + window_seconds))
            count += 1
            self._hits[key] = (count, reset)
            if count > limit:
                raise HTTPException(429, "Too many weather lookups. Try again in a moment.")

    def tracked(self) -> int:
        with self._lock:
            return len(self._hits)

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()


_limiter = _RateLimiter()


def client_key(request: Request, *, trust_forwarded_for: bool = False) -> str:
    """Socket peer address; X-Forwarded-For only when a trusted proxy sets it."""
    if trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded and forwarded.split(",")[0].strip():
            return forwarded.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def rate_limit_ip(
    request: Request,
    scope: str,
    *,
    limit: int,
    window_seconds: int,
    trust_forwarded_for: bool = False,
) -> None:
    key = f"{scope}:{client_key(request, trust_forwarded_for=trust_forwarded_for)}"
    _limiter.check(key, limit, window_seconds)


def tracked_clients() -> int:
    return _limiter.tracked()


def reset_limits() -> None:
    _limiter.reset()
