"""Exception hierarchy shared by services and routers."""

from __future__ import annotations


class SkynoteError(Exception):
    """Base class for every error raised by skynote services."""


class InvalidInput(SkynoteError):
    """Raised when user text (reminder title/description, city name) is blank after trimming."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ReminderStoreError(SkynoteError):
    """Base class for reminder store failures."""


class IndexOutOfRange(ReminderStoreError):
    def __init__(self, index: int, size: int):
        super().__init__(f"Index {index} is out of range for {size} reminder(s)")
        self.index = index
        self.size = size


class BackendUnavailable(ReminderStoreError):
    """Raised when the persistence handle cannot be acquired."""


class CorruptData(ReminderStoreError):
    """Raised when a stored snapshot exists but cannot be decoded."""


class BackendWriteFailure(ReminderStoreError):
    """Raised when a snapshot write did not complete."""


class WeatherError(SkynoteError):
    """Base class for weather lookup failures."""


class CityNotFound(WeatherError):
    pass


class WeatherLookupError(WeatherError):
    pass


class MalformedResponse(WeatherError):
    """Raised when the upstream payload lacks a required field."""
