"""Deterministic 3-D gradient noise for pattern perturbation.

A thin wrapper over OpenSimplex noise seeded from ``config.NOISE_SEED``.
The output is smooth, repeatable for a given seed and lies in [-1, 1].
"""

from opensimplex import OpenSimplex

from whitted.config import NOISE_SEED

_generator = OpenSimplex(seed=NOISE_SEED)


def noise(x: float, y: float, z: float) -> float:
    """Evaluate the package-wide noise field at (x, y, z)."""
    return float(_generator.noise3(x, y, z))
