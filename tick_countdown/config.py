"""Countdown configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tick_countdown.store import DEFAULT_SUFFIX, FileStore


@dataclass(frozen=True)
class CountdownConfig:
    """Immutable configuration for a countdown session.

    Attributes:
        directory: Where timer files are kept. The CLI uses the working
            directory.
        suffix: Filename suffix appended to every timer name. Must start
            with ``"."``.
        verbose: Enable debug logging.
    """

    directory: Path = Path(".")
    suffix: str = DEFAULT_SUFFIX
    verbose: bool = False

    def __post_init__(self) -> None:
        if len(self.suffix) < 2 or not self.suffix.startswith("."):
            raise ValueError(
                f"suffix must start with '.' and name an extension, got {self.suffix!r}"
            )
        if not isinstance(self.directory, Path):
            object.__setattr__(self, "directory", Path(self.directory))

    def store(self) -> FileStore:
        """Build the FileStore this configuration describes."""
        return FileStore(self.directory, self.suffix)
