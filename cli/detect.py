"""Detect command CLI parsing and control flow."""

from __future__ import annotations

import argparse
import logging

from config import OUTPUT_DIR, OUTPUT_PREFIX, PRESETS
from sobel import EdgeConfig, EdgeDetectionError, detect_edges

logger = logging.getLogger(__name__)

# CLI dest -> EdgeConfig field, for flags that override preset values
_OVERRIDE_FIELDS = {
    "gauss": "gauss_enabled",
    "sigma": "gauss_sigma",
    "size": "gauss_size",
    "normalize": "normalize_enabled",
    "invert": "invert",
    "intermediates": "emit_intermediates",
    "threshold": "edge_threshold",
    "label": "label",
}


def add_detect_subparser(subparsers: argparse._SubParsersAction) -> None:
    detect_parser = subparsers.add_parser(
        "detect",
        help="Run Sobel edge detection on an image file",
    )
    detect_parser.add_argument(
        "image",
        help="Path to the input image",
    )
    detect_parser.add_argument(
        "-o", "--output-dir",
        default=OUTPUT_DIR,
        help=f"Directory for written images (default: {OUTPUT_DIR})",
    )
    detect_parser.add_argument(
        "--prefix",
        default=OUTPUT_PREFIX,
        help=f"File name prefix for written images (default: {OUTPUT_PREFIX})",
    )
    detect_parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        help="Named stage combination; also used as the file label",
    )
    detect_parser.add_argument(
        "--gauss",
        action="store_true",
        default=None,
        help="Apply Gaussian smoothing before computing gradients",
    )
    detect_parser.add_argument(
        "--sigma",
        type=float,
        default=None,
        help="Gaussian sigma (must be > 0)",
    )
    detect_parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Gaussian kernel width (odd)",
    )
    detect_parser.add_argument(
        "--normalize",
        action="store_true",
        default=None,
        help="Apply histogram contrast normalization",
    )
    detect_parser.add_argument(
        "--invert",
        action="store_true",
        default=None,
        help="Write dark edges on a white background",
    )
    detect_parser.add_argument(
        "--intermediates",
        action="store_true",
        default=None,
        help="Also write lumi/gauss/normed/xgrad/ygrad images",
    )
    detect_parser.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Edge threshold for the final mask (0-255)",
    )
    detect_parser.add_argument(
        "--label",
        default=None,
        help="Label inserted into written file names",
    )
    detect_parser.set_defaults(_cmd=cmd_detect)


def build_config(args: argparse.Namespace) -> EdgeConfig:
    """Build an EdgeConfig from a preset plus explicit flag overrides."""
    overrides = {
        field_name: getattr(args, dest)
        for dest, field_name in _OVERRIDE_FIELDS.items()
        if getattr(args, dest, None) is not None
    }
    if args.preset:
        return EdgeConfig.from_preset(args.preset, **overrides)
    return EdgeConfig(**overrides)


def cmd_detect(args: argparse.Namespace) -> int:
    try:
        config = build_config(args)
        result = detect_edges(
            args.image,
            config=config,
            output_dir=args.output_dir,
            prefix=args.prefix,
        )
    except (EdgeDetectionError, ValueError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    logger.info("%s", "=" * 50)
    logger.info("Edge Detection Complete!")
    logger.info("%s", "=" * 50)
    logger.info("Image size:   %sx%s", result.width, result.height)
    logger.info("Stages run:   %s", ", ".join(result.stage_names))
    logger.info("Edge pixels:  %s", result.stages[-1].metadata["edge_pixels"])
    for name, path in result.artifact_paths.items():
        logger.info("Wrote %-7s %s", name, path)
    return 0
