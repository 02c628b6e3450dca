"""CountdownController: runs commands against a CountdownStore."""
from __future__ import annotations

import logging
import time
from typing import Any, Callable

from tick_countdown.commands import AddNew, Cancel, Command, DisplayAll
from tick_countdown.duration import MAX_DURATION, format_remaining
from tick_countdown.store import CountdownStore
from tick_countdown.types import Countdown, CountdownError, SaveError

logger = logging.getLogger(__name__)


class CountdownController:
    """Executes countdown commands and renders their output text.

    Only the CountdownStore protocol is used, so any conforming store can be
    passed in. *clock* returns the current UNIX time and defaults to
    ``time.time``.

    Storage errors from ``add_timer``, ``cancel_timer`` and ``display_timers``
    propagate unchanged. ``timers`` is the one method that swallows them.
    """

    def __init__(
        self,
        store: CountdownStore,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._store = store
        self._clock = clock
        self._handlers: dict[type[Any], Callable[[Any], str]] = {
            AddNew: lambda cmd: self.add_timer(cmd.name, cmd.duration),
            Cancel: lambda cmd: self.cancel_timer(cmd.name),
            DisplayAll: lambda cmd: self.display_timers(),
        }

    def execute(self, command: Command) -> str:
        """Run *command* and return its output text.

        Raises ``TypeError`` if *command* is not a known command variant.
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(
                f"No handler registered for {type(command).__qualname__}"
            )
        return handler(command)

    def timers(self) -> list[str]:
        """Return the stored names, or an empty list if listing fails."""
        try:
            return self._store.list()
        except CountdownError as exc:
            logger.debug("listing timers failed: %s", exc)
            return []

    def add_timer(self, name: str, duration: int) -> str:
        if duration > MAX_DURATION:
            raise SaveError(name, "duration is too large")
        countdown = Countdown(name=name, end_time=self._clock() + duration)
        self._store.save(countdown)
        logger.debug("added %s expiring at %s", name, countdown.end_time)
        return f"Added Timer: {name}"

    def cancel_timer(self, name: str) -> str:
        self._store.delete(name)
        return f"Canceled timer {name}"

    def display_timers(self) -> str:
        """One ``name: HH:MM:SS`` line per stored countdown, no trailing newline."""
        lines: list[str] = []
        for name in self._store.list():
            countdown = self._store.load(name)
            lines.append(self.format_countdown(countdown))
        return "\n".join(lines)

    def format_countdown(self, countdown: Countdown) -> str:
        remaining = countdown.time_remaining(self._clock())
        return f"{countdown.name}: {format_remaining(remaining)}"
