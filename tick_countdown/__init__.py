"""tick-countdown - Named countdown timers persisted as flat files."""
from __future__ import annotations

from tick_countdown.commands import AddNew, Cancel, Command, DisplayAll, parse_command
from tick_countdown.config import CountdownConfig
from tick_countdown.controller import CountdownController
from tick_countdown.duration import MAX_DURATION, format_remaining, parse_duration
from tick_countdown.store import CountdownStore, FileStore, MemoryStore
from tick_countdown.types import (
    CommandError,
    Countdown,
    CountdownError,
    NotFoundError,
    SaveError,
    StorageIOError,
)

__all__ = [
    "AddNew",
    "Cancel",
    "Command",
    "CommandError",
    "Countdown",
    "CountdownConfig",
    "CountdownController",
    "CountdownError",
    "CountdownStore",
    "DisplayAll",
    "FileStore",
    "MAX_DURATION",
    "MemoryStore",
    "NotFoundError",
    "SaveError",
    "StorageIOError",
    "format_remaining",
    "parse_command",
    "parse_duration",
]
