"""Protocol shared by the key-value persistence adapters."""
from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class KeyValueBackend(Protocol):
    """
    Blocking text key-value store.

    Implementations raise BackendUnavailable when the store cannot be reached
    and BackendWriteFailure when a write does not complete.
    """

    def open(self) -> None:
        ...

    def get_string(self, key: str) -> Optional[str]:
        ...

    def set_string(self, key: str, value: str) -> None:
        ...
