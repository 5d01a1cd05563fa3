"""
Reminder list use cases: load, add, remove and snapshot persistence.

The store owns the in-memory list and mirrors it to a KeyValueBackend under a
single key. Every mutation rewrites the full snapshot.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from starlette.concurrency import run_in_threadpool

from skynote.core.errors import BackendUnavailable, BackendWriteFailure, CorruptData, IndexOutOfRange
from skynote.domain.reminders import Reminder, decode_snapshot, encode_snapshot
from skynote.repositories.base import KeyValueBackend

logger = logging.getLogger(__name__)

DEFAULT_REMINDERS_KEY = "reminders"

Listener = Callable[[tuple[Reminder, ...]], None]


class ReminderStore:
    """
    Authoritative ordered reminder list synchronized with a key-value backend.

    Backend calls run in the threadpool. There is no lock: two overlapping
    mutations each persist their own view and the later write wins, so
    callers issuing concurrent mutations must serialize them.
    """

    def __init__(self, backend: KeyValueBackend, key: str = DEFAULT_REMINDERS_KEY) -> None:
        self.backend = backend
        self.key = key
        self._reminders: list[Reminder] = []
        self._listeners: list[Listener] = []
        self._ready = False

    # -------------------------------------- views --------------------------------------
    @property
    def reminders(self) -> tuple[Reminder, ...]:
        return tuple(self._reminders)

    @property
    def ready(self) -> bool:
        return self._ready

    def __len__(self) -> int:
        return len(self._reminders)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        snapshot = self.reminders
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Reminder listener %r failed", listener)

    # -------------------------------------- lifecycle --------------------------------------
    async def initialize(self) -> None:
        """Acquire the backend and load the stored list.

        BackendUnavailable propagates and leaves the store not ready, so no
        write can replace a snapshot that was never read. A corrupt snapshot
        is logged and the store starts empty instead of blocking startup.
        """
        self._ready = False
        try:
            await run_in_threadpool(self.backend.open)
            await self.load()
        except BackendUnavailable:
            logger.error("Reminder backend unavailable")
            raise
        except CorruptData as exc:
            logger.warning("Ignoring corrupt reminder snapshot under '%s': %s", self.key, exc)
        self._ready = True

    async def load(self) -> tuple[Reminder, ...]:
        raw = await run_in_threadpool(self.backend.get_string, self.key)
        self._reminders.clear()
        if raw is None:
            logger.info("No reminder snapshot under '%s'; starting empty", self.key)
            self._notify()
            return self.reminders
        try:
            decoded = decode_snapshot(raw)
        except CorruptData:
            self._notify()
            raise
        self._reminders.extend(decoded)
        logger.info("Loaded %d reminder(s)", len(decoded))
        self._notify()
        return self.reminders

    # -------------------------------------- mutations --------------------------------------
    def _require_ready(self) -> None:
        if not self._ready:
            raise BackendUnavailable("Reminder store is not initialized")

    async def add(self, title: Optional[str], description: Optional[str]) -> Reminder:
        """Append a reminder and persist. Raises InvalidInput on blank fields.

        If the write fails the reminder stays in memory and
        BackendWriteFailure propagates; retry with persist().
        """
        self._require_ready()
        reminder = Reminder.create(title, description)
        self._reminders.append(reminder)
        self._notify()
        await self.persist()
        logger.info("Added reminder: %s", reminder.title)
        return reminder

    async def remove_at(self, index: int) -> Reminder:
        self._require_ready()
        if index < 0 or index >= len(self._reminders):
            raise IndexOutOfRange(index, len(self._reminders))
        removed = self._reminders.pop(index)
        self._notify()
        await self.persist()
        logger.info("Removed reminder %d: %s", index, removed.title)
        return removed

    async def persist(self) -> None:
        self._require_ready()
        payload = encode_snapshot(self._reminders)
        try:
            await run_in_threadpool(self.backend.set_string, self.key, payload)
        except BackendWriteFailure:
            logger.error("Failed to persist %d reminder(s) under '%s'", len(self._reminders), self.key)
            raise
        logger.debug("Saved %d reminder(s)", len(self._reminders))
