#!/usr/bin/env python3
"""
Command line interface for Sobel edge detection.

Usage:
    sobel_edges detect <image>                  # Write sum + final edge images
    sobel_edges detect <image> --preset all     # Gaussian + normalization
    sobel_edges detect <image> --intermediates  # Also write every stage
    sobel_edges kernel --sigma 1 --size 5       # Print a Gaussian kernel
    sobel_edges presets                         # List named presets
"""

import argparse
import logging
import sys

from logging_utils import configure_logging, add_logging_args
from cli.detect import add_detect_subparser
from cli.kernel import add_kernel_subparser
from cli.presets import add_presets_subparser

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sobel_edges",
        description="Sobel edge detection with optional smoothing and contrast normalization",
    )
    add_logging_args(parser)
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    add_detect_subparser(subparsers)
    add_kernel_subparser(subparsers)
    add_presets_subparser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.verbose, args.quiet)

    if args.command is None:
        parser.print_help()
        return 1

    return args._cmd(args)


if __name__ == "__main__":
    sys.exit(main())
