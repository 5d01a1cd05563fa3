"""Reminder record and the snapshot codec used to persist a reminder list."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from skynote.core.errors import CorruptData, InvalidInput


@dataclass(frozen=True)
class Reminder:
    """A title/description pair. Identity is its position in the owning list."""

    title: str
    description: str

    @classmethod
    def create(cls, title: str | None, description: str | None) -> "Reminder":
        """Build a reminder from raw user input, trimming both fields."""
        clean_title = (title or "").strip()
        clean_description = (description or "").strip()
        if not clean_title or not clean_description:
            raise InvalidInput("Please enter both Title and Description.")
        return cls(clean_title, clean_description)

    def to_dict(self) -> dict:
        return {"title": self.title, "description": self.description}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Reminder":
        title = data.get("title")
        description = data.get("description")
        if not isinstance(title, str) or not isinstance(description, str):
            raise CorruptData("Reminder record requires text 'title' and 'description'")
        if not title.strip() or not description.strip():
            raise CorruptData("Reminder record has an empty 'title' or 'description'")
        return cls(title, description)


def encode_snapshot(reminders: Iterable[Reminder]) -> str:
    """Serialize the whole list, in order, as a JSON array of records."""
    return json.dumps([r.to_dict() for r in reminders], ensure_ascii=False)


def decode_snapshot(raw: str) -> list[Reminder]:
    """
    Parse a snapshot produced by encode_snapshot.

    Any structural problem (invalid JSON, non-list payload, non-object item,
    missing or non-text field) raises CorruptData; nothing is partially
    recovered.
    """
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise CorruptData(f"Reminder snapshot is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise CorruptData("Reminder snapshot must be a JSON array")
    reminders: list[Reminder] = []
    for position, item in enumerate(payload):
        if not isinstance(item, dict):
            raise CorruptData(f"Reminder snapshot item {position} is not an object")
        reminders.append(Reminder.from_dict(item))
    return reminders
