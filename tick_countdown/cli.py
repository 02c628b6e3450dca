"""Command-line entry point: ``tick-countdown [-v] [add|cancel ...]``."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from tick_countdown.commands import parse_command
from tick_countdown.config import CountdownConfig
from tick_countdown.controller import CountdownController
from tick_countdown.types import CountdownError

logger = logging.getLogger("tick_countdown")

# Leading tokens handed to argparse. Anything else, dashes included, is a
# command word.
_OPTION_TOKENS = frozenset({"-v", "--verbose", "-h", "--help"})


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tick-countdown",
        usage="%(prog)s [-v] [add <name...> <duration> | cancel <name...>]",
        description="Named countdown timers stored as files in the working directory.",
        epilog="examples: tick-countdown add tea 4m | tick-countdown cancel tea",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return p


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse leading options; every token from the first non-option on is ``words``."""
    tokens = list(sys.argv[1:] if argv is None else argv)
    split = 0
    while split < len(tokens) and tokens[split] in _OPTION_TOKENS:
        split += 1
    args = _build_parser().parse_args(tokens[:split])
    args.words = tokens[split:]
    return args


def main(argv: Sequence[str] | None = None, config: CountdownConfig | None = None) -> int:
    """Run one command and return the process exit status."""
    args = parse_args(argv)
    if config is None:
        config = CountdownConfig(directory=Path("."), verbose=args.verbose)
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.setLevel(logging.DEBUG if (args.verbose or config.verbose) else logging.WARNING)

    controller = CountdownController(config.store())
    try:
        command = parse_command(args.words)
        logger.debug("running %r", command)
        out = controller.execute(command)
    except CountdownError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(out, end="")
    return 0
