#!/usr/bin/env python3
"""
Print stored reminders, optionally removing one by position first.

Usage:
  python scripts/list_reminders.py [--remove 2]
"""
from __future__ import annotations

import argparse
import asyncio
from typing import Optional

from skynote.core.config import get_settings
from skynote.core.errors import IndexOutOfRange, ReminderStoreError
from skynote.repositories import build_backend
from skynote.services.reminder_store import ReminderStore


async def _run(remove: Optional[int]) -> None:
    settings = get_settings()
    store = ReminderStore(build_backend(settings), key=settings.reminders_key)
    await store.initialize()
    if remove is not None:
        removed = await store.remove_at(remove)
        print(f"Removed '{removed.title}'")
    if not len(store):
        print("No reminders yet.")
        return
    for position, reminder in enumerate(store.reminders):
        print(f"[{position}] {reminder.title}: {reminder.description}")


def main() -> None:
    ap = argparse.ArgumentParser(description="List stored reminders")
    ap.add_argument("--remove", type=int, help="Position of a reminder to delete before listing")
    args = ap.parse_args()
    try:
        asyncio.run(_run(args.remove))
    except IndexOutOfRange as exc:
        raise SystemExit(str(exc))
    except ReminderStoreError as exc:
        raise SystemExit(f"Reminder storage error: {exc}")


if __name__ == "__main__":
    main()
