"""Rendering constants and settings.

Numeric tolerances and recursion limits live here so every module agrees on
them. ``RenderSettings`` bundles the per-render knobs accepted by
``Camera.render``.
"""

import os
from dataclasses import dataclass

# =============================================================================
# Numeric Constants
# =============================================================================

# Tolerance for approximate comparisons and the shading-point offset that
# keeps secondary rays off the surface they start from
EPSILON = 1e-4

# Remaining-bounce budget for reflected and refracted rays
MAX_DEPTH = 5

# =============================================================================
# Output Constants
# =============================================================================

# Plain-text pixmap output: maximum channel value and line budget
PPM_MAX_COLOUR = 255
PPM_LINE_WIDTH = 70

# Seed for the OpenSimplex generator behind pattern perturbation noise
NOISE_SEED = 0

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.environ.get("WHITTED_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class RenderSettings:
    """Per-render settings for the camera loop.

    Attributes:
        max_depth: Remaining-bounce budget handed to ``World.colour_at`` for
            every primary ray. Zero disables reflection and refraction.
        log_every: Emit a DEBUG progress message every this many rows.
    """

    max_depth: int = MAX_DEPTH
    log_every: int = 1

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.log_every < 1:
            raise ValueError(f"log_every must be at least 1, got {self.log_every}")
