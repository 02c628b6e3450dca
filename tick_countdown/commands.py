"""Command variants and the positional command-line parser."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from tick_countdown.duration import MAX_DURATION, parse_duration
from tick_countdown.types import CommandError


@dataclass(frozen=True)
class DisplayAll:
    """Show every stored countdown with its remaining time."""


@dataclass(frozen=True)
class AddNew:
    """Create (or overwrite) a countdown expiring *duration* seconds from now."""

    name: str
    duration: int


@dataclass(frozen=True)
class Cancel:
    """Delete a stored countdown."""

    name: str


Command = DisplayAll | AddNew | Cancel


def parse_command(tokens: Sequence[str]) -> Command:
    """Map positional tokens onto a command.

    ``add <name...> <duration>`` and ``cancel <name...>`` join their name
    tokens with single spaces. No tokens, or any other first token, means
    ``DisplayAll``.

    Raises ``CommandError`` when ``add`` or ``cancel`` is missing its name or
    duration, or when the duration exceeds ``MAX_DURATION``.
    """
    if not tokens:
        return DisplayAll()
    verb, rest = tokens[0], list(tokens[1:])
    if verb == "add":
        if not rest:
            raise CommandError("add requires a name and a duration")
        dur_str = rest.pop()
        name = " ".join(rest)
        if not name:
            raise CommandError("add requires a name before the duration")
        duration = parse_duration(dur_str)
        if duration > MAX_DURATION:
            raise CommandError("duration is too large")
        return AddNew(name=name, duration=duration)
    if verb == "cancel":
        name = " ".join(rest)
        if not name:
            raise CommandError("cancel requires a name")
        return Cancel(name=name)
    return DisplayAll()
