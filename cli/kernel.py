"""Gaussian kernel inspection command."""

from __future__ import annotations

import argparse
import logging

import numpy as np

from config import GAUSS_SIGMA, GAUSS_SIZE
from sobel import gaussian_kernel

logger = logging.getLogger(__name__)


def add_kernel_subparser(subparsers: argparse._SubParsersAction) -> None:
    kernel_parser = subparsers.add_parser(
        "kernel",
        help="Print the normalized Gaussian kernel for a sigma and size",
    )
    kernel_parser.add_argument(
        "--sigma",
        type=float,
        default=GAUSS_SIGMA,
        help=f"Gaussian sigma (default: {GAUSS_SIGMA})",
    )
    kernel_parser.add_argument(
        "--size",
        type=int,
        default=GAUSS_SIZE,
        help=f"Kernel width, odd (default: {GAUSS_SIZE})",
    )
    kernel_parser.set_defaults(_cmd=cmd_kernel)


def cmd_kernel(args: argparse.Namespace) -> int:
    try:
        kernel = gaussian_kernel(args.sigma, args.size)
    except (TypeError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Gaussian kernel sigma=%s size=%s", args.sigma, args.size)
    with np.printoptions(precision=6, suppress=True):
        for row in kernel:
            logger.info("%s", row)
    logger.info("Sum: %.6f", kernel.sum())
    return 0
