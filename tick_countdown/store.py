"""Countdown storage protocol with file-backed and in-memory implementations."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from tick_countdown.types import Countdown, NotFoundError, SaveError, StorageIOError

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = ".timer"

_FORBIDDEN_CHARS = ("/", "\\", "\x00")


@runtime_checkable
class CountdownStore(Protocol):
    """Protocol for countdown persistence.

    Every method takes and returns *bare* names. How a name maps onto the
    backing storage is an implementation detail.
    """

    def save(self, countdown: Countdown) -> None:
        """Create or overwrite the record for ``countdown.name``."""
        ...

    def load(self, name: str) -> Countdown:
        """Return the stored countdown, or raise ``NotFoundError``."""
        ...

    def delete(self, name: str) -> None:
        """Remove the record for *name*, or raise ``NotFoundError``."""
        ...

    def list(self) -> list[str]:
        """Return every stored name in lexicographic order."""
        ...


def name_problem(name: str) -> str | None:
    """Describe why *name* cannot be used as a storage key, or None if it can."""
    if not name:
        return "name is empty"
    if name in (".", ".."):
        return f"{name!r} is a reserved name"
    for ch in _FORBIDDEN_CHARS:
        if ch in name:
            return f"name contains {ch!r}"
    return None


def serialize_time(end_time: float) -> str:
    """Encode an expiry instant as decimal UNIX seconds, rounded to the nearest second."""
    return str(round(end_time))


def deserialize_time(text: str) -> float:
    """Decode :func:`serialize_time` output.

    Only plain ASCII digits are accepted, so signs, underscores and other
    Unicode digits are rejected. Raises ``ValueError`` on bad input,
    including timestamps too large for a float.
    """
    digits = text.strip()
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid timestamp {digits[:40]!r}")
    try:
        return float(int(digits))
    except OverflowError as exc:
        raise ValueError(f"timestamp out of range ({len(digits)} digits)") from exc


class FileStore:
    """One ``<name><suffix>`` file per countdown inside *directory*.

    Each file holds the expiry instant as produced by :func:`serialize_time`.
    ``OSError`` is wrapped in ``StorageIOError``; a missing file on load or
    delete becomes ``NotFoundError``.
    """

    def __init__(
        self,
        directory: str | Path = ".",
        suffix: str = DEFAULT_SUFFIX,
    ) -> None:
        if not suffix:
            raise ValueError("suffix must not be empty")
        self._directory = Path(directory)
        self._suffix = suffix

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def suffix(self) -> str:
        return self._suffix

    def path_for(self, name: str) -> Path:
        """Return the file that backs *name*."""
        return self._directory / f"{name}{self._suffix}"

    def save(self, countdown: Countdown) -> None:
        problem = name_problem(countdown.name)
        if problem is not None:
            raise SaveError(countdown.name, problem)
        path = self.path_for(countdown.name)
        try:
            with path.open("w", encoding="utf-8") as f:
                f.write(serialize_time(countdown.end_time))
        except OSError as exc:
            raise StorageIOError(exc) from exc
        logger.debug("saved %s to %s", countdown.name, path)

    def load(self, name: str) -> Countdown:
        if name_problem(name) is not None:
            raise NotFoundError(name)
        path = self.path_for(name)
        try:
            with path.open("r", encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError as exc:
            raise NotFoundError(name) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageIOError(exc) from exc
        try:
            end_time = deserialize_time(text)
        except (ValueError, OverflowError) as exc:
            raise StorageIOError(exc) from exc
        return Countdown(name=name, end_time=end_time)

    def delete(self, name: str) -> None:
        if name_problem(name) is not None:
            raise NotFoundError(name)
        path = self.path_for(name)
        try:
            path.unlink()
        except FileNotFoundError as exc:
            raise NotFoundError(name) from exc
        except OSError as exc:
            raise StorageIOError(exc) from exc
        logger.debug("deleted %s", path)

    def list(self) -> list[str]:
        try:
            entries = list(self._directory.iterdir())
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StorageIOError(exc) from exc
        names: list[str] = []
        for entry in entries:
            filename = entry.name
            if len(filename) <= len(self._suffix):
                continue
            if not filename.endswith(self._suffix) or not entry.is_file():
                continue
            names.append(filename[: -len(self._suffix)])
        # iterdir() order is filesystem-dependent
        names.sort()
        return names


class MemoryStore:
    """Dict-backed store with the same semantics as :class:`FileStore`.

    Conforms to the CountdownStore protocol. Nothing is persisted, which makes
    it the store of choice for tests.
    """

    def __init__(self) -> None:
        self._countdowns: dict[str, Countdown] = {}

    def __len__(self) -> int:
        return len(self._countdowns)

    def save(self, countdown: Countdown) -> None:
        problem = name_problem(countdown.name)
        if problem is not None:
            raise SaveError(countdown.name, problem)
        self._countdowns[countdown.name] = countdown

    def load(self, name: str) -> Countdown:
        try:
            return self._countdowns[name]
        except KeyError:
            raise NotFoundError(name) from None

    def delete(self, name: str) -> None:
        if self._countdowns.pop(name, None) is None:
            raise NotFoundError(name)

    def list(self) -> list[str]:
        return sorted(self._countdowns)
