"""
JSON file persistence adapter.

The whole store is one JSON object mapping keys to text values. Writes go to
a temporary file that then replaces the original.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import json
import logging

from skynote.core.errors import BackendUnavailable, BackendWriteFailure

logger = logging.getLogger(__name__)


class JsonKeyValueStorage:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def open(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if self.path.exists():
                self._load()
        except OSError as exc:
            raise BackendUnavailable(f"Cannot open {self.path}: {exc}") from exc
        logger.info("JSON storage ready: %s", self.path)

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise BackendUnavailable(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise BackendUnavailable(f"{self.path} does not hold a JSON object")
        return data

    def get_string(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            # snapshot stored by hand as raw JSON instead of text
            return json.dumps(value, ensure_ascii=False)
        return value

    def set_string(self, key: str, value: str) -> None:
        try:
            data = self._load()
        except BackendUnavailable as exc:
            raise BackendWriteFailure(str(exc)) from exc
        data[key] = value
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            temp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            temp_path.replace(self.path)
        except OSError as exc:
            raise BackendWriteFailure(f"Cannot write {self.path}: {exc}") from exc
