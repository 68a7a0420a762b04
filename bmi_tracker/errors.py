from __future__ import annotations

"""Exception types raised by the BMI tracker backend layers."""

from typing import Optional


class BmiTrackerError(Exception):
    """Base class for all tracker errors."""


class ConfigError(BmiTrackerError):
    """Configuration file or environment value could not be used."""


class ApiError(BmiTrackerError):
    """A call to the records API failed.

    `message` is safe to show to the user as-is; the underlying cause (if
    any) is chained via `raise ... from`.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (HTTP {self.status_code})"


__all__ = ["ApiError", "BmiTrackerError", "ConfigError"]
