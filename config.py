"""Central configuration for Sobel edge detection.

All tunable parameters are defined here with descriptive names.
EdgeConfig (sobel/config.py) takes its defaults from these values, so
changing a constant here changes the default behaviour of every run.
"""

# =============================================================================
# GAUSSIAN SMOOTHING
# =============================================================================

# Smooth the luminance image before computing gradients
GAUSS_ENABLED = False

# Spread of the Gaussian kernel (must be > 0)
GAUSS_SIGMA = 1.0

# Width of the square Gaussian kernel (must be odd so a center cell exists)
GAUSS_SIZE = 3

# =============================================================================
# CONTRAST NORMALIZATION
# =============================================================================

# Apply the cumulative-histogram remap before computing gradients
NORMALIZE_ENABLED = False

# =============================================================================
# OUTPUT
# =============================================================================

# Invert all written images (edges black on a white background)
INVERT_OUTPUT = False

# Also write lumi/gauss/normed/xgrad/ygrad snapshots
EMIT_INTERMEDIATES = False

# Magnitude above which a pixel counts as an edge in the final mask (0-255)
EDGE_THRESHOLD = 50

# Brightness factor applied when quantizing buffers (1.0 = unchanged)
OUTPUT_SCALE = 1.0

# Directory and filename prefix for written artifacts
OUTPUT_DIR = "outputs"
OUTPUT_PREFIX = "sobel_"

# =============================================================================
# INPUT
# =============================================================================

# Supported image extensions
IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".bmp", ".tiff", ".tif"}

# =============================================================================
# PRESETS
# =============================================================================

# Named stage combinations. The preset name doubles as the artifact label.
PRESETS = {
    "none": {},
    "normnogauss": {"normalize_enabled": True},
    "gaussnonorm": {"gauss_enabled": True, "gauss_sigma": 1.0, "gauss_size": 5},
    "all": {
        "normalize_enabled": True,
        "gauss_enabled": True,
        "gauss_sigma": 1.0,
        "gauss_size": 5,
    },
}
