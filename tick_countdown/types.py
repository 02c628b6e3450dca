"""Countdown entity and error types for tick-countdown."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Countdown:
    """A named timer expiring at ``end_time`` (UNIX seconds)."""

    name: str
    end_time: float

    def time_remaining(self, now: float) -> int:
        """Whole seconds left before expiry, saturating at 0."""
        if self.end_time > now:
            return int(self.end_time - now)
        return 0


class CountdownError(Exception):
    """Base class for every error raised by tick-countdown."""


class NotFoundError(CountdownError, KeyError):
    """Raised when a countdown has no backing record."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} was not found")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class SaveError(CountdownError):
    """Raised when a countdown cannot be saved under its name."""

    def __init__(self, name: str, reason: str = "") -> None:
        self.name = name
        self.reason = reason
        message = f"Failed to save {name}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class StorageIOError(CountdownError):
    """Wraps a filesystem failure or unreadable record."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"IO Error: {cause}")


class CommandError(CountdownError, ValueError):
    """Raised for command-line input that does not form a valid command."""
