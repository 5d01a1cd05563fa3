"""
Persistence adapters.

Each adapter implements the KeyValueBackend protocol (open/get_string/
set_string) so services depend on the protocol rather than on a JSON file or
a SQL session directly.
"""

from .base import KeyValueBackend
from .json_storage import JsonKeyValueStorage
from .sql_repository import SQLKeyValueRepository

__all__ = ["KeyValueBackend", "JsonKeyValueStorage", "SQLKeyValueRepository", "build_backend"]


def build_backend(settings) -> KeyValueBackend:
    """Return the adapter selected by STORAGE_BACKEND."""
    if settings.storage_backend == "json":
        return JsonKeyValueStorage(settings.json_storage_path)
    return SQLKeyValueRepository()
