"""
Configuration for the edge detection pipeline.

All stages are parameterized through EdgeConfig so a run can be reproduced
from its configuration alone.
"""

import math
from dataclasses import dataclass, replace
from typing import Any

from config import (
    GAUSS_ENABLED,
    GAUSS_SIGMA,
    GAUSS_SIZE,
    NORMALIZE_ENABLED,
    INVERT_OUTPUT,
    EMIT_INTERMEDIATES,
    EDGE_THRESHOLD,
    PRESETS,
)


@dataclass(frozen=True)
class EdgeConfig:
    """Configuration for one edge detection run.

    Attributes:
        gauss_enabled: Smooth the luminance buffer before gradients.
        gauss_sigma: Spread of the Gaussian kernel. Must be positive and finite.
        gauss_size: Width of the square Gaussian kernel. Must be odd.
        normalize_enabled: Apply the cumulative-histogram contrast remap.
        invert: Invert every written image (dark edges on white).
        emit_intermediates: Also write lumi/gauss/normed/xgrad/ygrad images.
        edge_threshold: Magnitude above which a pixel is an edge (0-255).
        label: Optional label inserted into artifact file names.
    """

    gauss_enabled: bool = GAUSS_ENABLED
    gauss_sigma: float = GAUSS_SIGMA
    gauss_size: int = GAUSS_SIZE
    normalize_enabled: bool = NORMALIZE_ENABLED
    invert: bool = INVERT_OUTPUT
    emit_intermediates: bool = EMIT_INTERMEDIATES
    edge_threshold: int = EDGE_THRESHOLD
    label: str = ""

    def validate(self) -> None:
        """Validate configuration parameters.

        Raises:
            ValueError: If any parameter is invalid.
        """
        if not math.isfinite(self.gauss_sigma) or self.gauss_sigma <= 0:
            raise ValueError(
                f"gauss_sigma must be positive and finite, got {self.gauss_sigma}"
            )

        if not isinstance(self.gauss_size, int) or isinstance(self.gauss_size, bool):
            raise ValueError(
                f"gauss_size must be an int, got {type(self.gauss_size).__name__}"
            )
        if self.gauss_size < 1 or self.gauss_size % 2 == 0:
            raise ValueError(
                f"gauss_size must be an odd integer >= 1, got {self.gauss_size}"
            )

        if not isinstance(self.edge_threshold, int) or isinstance(self.edge_threshold, bool):
            raise ValueError(
                f"edge_threshold must be an int, got {type(self.edge_threshold).__name__}"
            )
        if not 0 <= self.edge_threshold <= 255:
            raise ValueError(
                f"edge_threshold must be within [0, 255], got {self.edge_threshold}"
            )

    @property
    def file_label(self) -> str:
        """Label as it appears in artifact names ("" or "<label>_")."""
        return f"{self.label}_" if self.label else ""

    @classmethod
    def from_preset(cls, name: str, **overrides: Any) -> "EdgeConfig":
        """Build a config from a named preset in config.PRESETS.

        The preset name becomes the label unless `label` is overridden.

        Raises:
            ValueError: If the preset name is unknown.
        """
        if name not in PRESETS:
            known = ", ".join(sorted(PRESETS))
            raise ValueError(f"Unknown preset {name!r} (known: {known})")
        values: dict[str, Any] = {"label": name}
        values.update(PRESETS[name])
        values.update(overrides)
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> "EdgeConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)
