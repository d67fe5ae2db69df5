"""Two-colour procedural patterns.

Each pattern maps a point in its own space to a colour. Patterns carry an
optional transform (pattern space relative to object space) and can jitter
the lookup point with smooth noise to break up the hard edges.

Pattern functions:
    stripe: ``a`` where floor(x) is even, else ``b``
    gradient: linear blend from ``a`` to ``b`` across each unit of x
    ring: ``a`` where floor(sqrt(x^2 + z^2)) is even, else ``b``
    checker: ``a`` where floor(x) + floor(y) + floor(z) is even, else ``b``
    test: the point's own coordinates as a colour

Example:
    >>> from whitted.core.tuples import BLACK, WHITE, point
    >>> from whitted.materials.pattern import Pattern
    >>> stripes = Pattern.stripe(WHITE, BLACK)
    >>> stripes.at(point(1.5, 0, 0)) == BLACK
    True
"""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional

from whitted.core.matrix import Matrix, identity
from whitted.core.tuples import BLACK, WHITE, Vec3, colour, vector
from whitted.materials.noise import noise


class PatternKind(IntEnum):
    """Enumeration of procedural pattern functions."""

    STRIPE = 0
    RING = 1
    GRADIENT = 2
    CHECKER = 3
    TEST = 4


# Offsets decorrelating the three noise samples used for perturbation
_PERTURB_OFFSET_Y = 1.7
_PERTURB_OFFSET_Z = 3.1


@dataclass
class Pattern:
    """A procedural colour function.

    Attributes:
        kind: Which pattern function to evaluate.
        a: First colour.
        b: Second colour.
        transform: Pattern-space transform relative to the owning object's
            space. None means identity.
        perturb: Whether to jitter the lookup point with noise.
        perturb_scale: Maximum jitter distance when ``perturb`` is set.
    """

    kind: PatternKind
    a: Vec3 = WHITE
    b: Vec3 = BLACK
    transform: Optional[Matrix] = None
    perturb: bool = False
    perturb_scale: float = 0.2

    @classmethod
    def stripe(cls, a: Vec3, b: Vec3, perturb: bool = False) -> "Pattern":
        return cls(PatternKind.STRIPE, a, b, perturb=perturb)

    @classmethod
    def ring(cls, a: Vec3, b: Vec3, perturb: bool = False) -> "Pattern":
        return cls(PatternKind.RING, a, b, perturb=perturb)

    @classmethod
    def gradient(cls, a: Vec3, b: Vec3, perturb: bool = False) -> "Pattern":
        return cls(PatternKind.GRADIENT, a, b, perturb=perturb)

    @classmethod
    def checker(cls, a: Vec3, b: Vec3, perturb: bool = False) -> "Pattern":
        return cls(PatternKind.CHECKER, a, b, perturb=perturb)

    @classmethod
    def test_pattern(cls) -> "Pattern":
        return cls(PatternKind.TEST)

    @property
    def inverse(self) -> Matrix:
        """Inverse of the pattern transform (identity when none is set).

        Raises:
            NotInvertibleError: If the transform is singular.
        """
        if self.transform is None:
            return identity()
        return self.transform.inverse()

    def at(self, pattern_point: Vec3) -> Vec3:
        """Evaluate the pattern at a point already in pattern space."""
        if self.perturb:
            pattern_point = _perturb(pattern_point, self.perturb_scale)
        return _PATTERN_FUNCTIONS[self.kind](self, pattern_point)


def _perturb(p: Vec3, scale: float) -> Vec3:
    jitter = vector(
        noise(p.x, p.y, p.z),
        noise(p.x + _PERTURB_OFFSET_Y, p.y + _PERTURB_OFFSET_Y, p.z + _PERTURB_OFFSET_Y),
        noise(p.x + _PERTURB_OFFSET_Z, p.y + _PERTURB_OFFSET_Z, p.z + _PERTURB_OFFSET_Z),
    )
    return p + jitter * scale


def _stripe_at(pattern: Pattern, p: Vec3) -> Vec3:
    return pattern.a if math.floor(p.x) % 2 == 0 else pattern.b


def _gradient_at(pattern: Pattern, p: Vec3) -> Vec3:
    fraction = p.x - math.floor(p.x)
    return pattern.a + (pattern.b - pattern.a) * fraction


def _ring_at(pattern: Pattern, p: Vec3) -> Vec3:
    return pattern.a if math.floor(math.sqrt(p.x * p.x + p.z * p.z)) % 2 == 0 else pattern.b


def _checker_at(pattern: Pattern, p: Vec3) -> Vec3:
    parity = (math.floor(p.x) + math.floor(p.y) + math.floor(p.z)) % 2
    return pattern.a if parity == 0 else pattern.b


def _test_at(pattern: Pattern, p: Vec3) -> Vec3:
    return colour(p.x, p.y, p.z)


_PATTERN_FUNCTIONS: dict[PatternKind, Callable[[Pattern, Vec3], Vec3]] = {
    PatternKind.STRIPE: _stripe_at,
    PatternKind.RING: _ring_at,
    PatternKind.GRADIENT: _gradient_at,
    PatternKind.CHECKER: _checker_at,
    PatternKind.TEST: _test_at,
}
