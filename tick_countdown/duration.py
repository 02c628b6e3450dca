"""Duration strings in, HH:MM:SS out."""
from __future__ import annotations

import re

# (pattern, seconds per unit). Each unit is matched independently.
_UNITS: tuple[tuple[re.Pattern[str], int], ...] = (
    (re.compile(r"(\d+)[hH]"), 3600),
    (re.compile(r"(\d+)[mM]"), 60),
    (re.compile(r"(\d+)[sS]"), 1),
)

# Unit values with more significant digits than this saturate at 10**_MAX_DIGITS.
_MAX_DIGITS = 20

# Longest duration that still gives an expiry instant exact to the second.
MAX_DURATION = 10**12


def parse_duration(text: str) -> int:
    """Return the total seconds encoded in a compact duration string.

    Hours, minutes and seconds are each looked up on their own, so order and
    separators do not matter. Only the first ``<digits><unit>`` of each unit
    counts. Anything that does not match is ignored, which means malformed
    or empty input parses to ``0`` rather than raising. Absurdly long unit
    values saturate instead of tripping the int-from-string digit limit, so
    callers compare the result against ``MAX_DURATION``.

    >>> parse_duration("2h30m")
    9000
    >>> parse_duration("garbage")
    0
    """
    total = 0
    for pattern, scale in _UNITS:
        match = pattern.search(text)
        if match is None:
            continue
        total += _unit_value(match.group(1)) * scale
    return total


def _unit_value(digits: str) -> int:
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        return 10**_MAX_DIGITS
    return int(digits)


def format_remaining(seconds: int) -> str:
    """Format whole seconds as ``HH:MM:SS``. Hours are not wrapped at 24."""
    seconds = max(0, seconds)
    hours = seconds // 3600
    minutes = seconds // 60 - hours * 60
    secs = seconds - hours * 3600 - minutes * 60
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
