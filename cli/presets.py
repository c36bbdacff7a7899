"""Preset listing command."""

from __future__ import annotations

import argparse
import logging

from config import PRESETS

logger = logging.getLogger(__name__)


def add_presets_subparser(subparsers: argparse._SubParsersAction) -> None:
    presets_parser = subparsers.add_parser(
        "presets",
        help="List named stage presets",
    )
    presets_parser.set_defaults(_cmd=cmd_presets)


def cmd_presets(args: argparse.Namespace) -> int:
    for name in sorted(PRESETS):
        settings = ", ".join(f"{key}={value}" for key, value in PRESETS[name].items())
        logger.info("%-12s %s", name, settings or "(defaults)")
    return 0
