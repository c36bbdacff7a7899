"""Logging setup for the sobel_edges CLI and stage timing helpers."""

from __future__ import annotations

import logging
import sys
import time
from contextlib import contextmanager
from typing import Iterator

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

# -v / -q steps, from most to least verbose; index 1 is the default
_VERBOSITY_STEPS = (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def add_logging_args(parser) -> None:
    """Add --log-level, -v and -q to an argparse parser."""
    parser.add_argument(
        "--log-level",
        choices=tuple(LOG_LEVELS),
        help="Explicit log level (overrides -v/-q)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Show stage details (debug output)",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="count",
        default=0,
        help="Hide stage timings (-qq: errors only)",
    )


def resolve_log_level(
    log_level: str | None = None,
    verbose: int = 0,
    quiet: int = 0,
) -> int:
    """Pick the numeric log level from --log-level or the -v/-q counts."""
    if log_level:
        return LOG_LEVELS[log_level.lower()]
    step = min(max(1 - verbose + quiet, 0), len(_VERBOSITY_STEPS) - 1)
    return _VERBOSITY_STEPS[step]


def configure_logging(
    log_level: str | None = None,
    verbose: int = 0,
    quiet: int = 0,
) -> int:
    """Set up root logging on stdout and return the active level.

    If handlers are already installed (e.g. under pytest) only their levels
    are changed.
    """
    level = resolve_log_level(log_level=log_level, verbose=verbose, quiet=quiet)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", stream=sys.stdout)
        return level

    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)
    return level


@contextmanager
def log_duration(logger: logging.Logger, label: str) -> Iterator[None]:
    """Log how long the wrapped block took, in milliseconds.

    The timing is logged even when the block raises, so a failing stage
    still shows up in the log next to the error.
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.info("%s: %.1fms", label, elapsed_ms)
