#!/usr/bin/env python3
"""
Append a reminder to the configured store (SQL or JSON).

Usage:
  python scripts/add_reminder.py --title "Dentist" --description "Tuesday 3pm"
"""
from __future__ import annotations

import argparse
import asyncio

from skynote.core.config import get_settings
from skynote.core.errors import InvalidInput, ReminderStoreError
from skynote.repositories import build_backend
from skynote.services.reminder_store import ReminderStore


async def _run(title: str, description: str) -> None:
    settings = get_settings()
    store = ReminderStore(build_backend(settings), key=settings.reminders_key)
    await store.initialize()
    reminder = await store.add(title, description)
    print(f"Saved '{reminder.title}' ({len(store)} reminder(s) stored)")


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a reminder")
    ap.add_argument("--title", required=True, help="Short title")
    ap.add_argument("--description", required=True, help="Reminder details")
    args = ap.parse_args()
    try:
        asyncio.run(_run(args.title, args.description))
    except InvalidInput as exc:
        raise SystemExit(exc.message)
    except ReminderStoreError as exc:
        raise SystemExit(f"Failed to save reminder: {exc}")


if __name__ == "__main__":
    main()
