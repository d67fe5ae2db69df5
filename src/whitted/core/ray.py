"""Ray data structure.

A ray is an origin point plus a direction vector. Rays are values: every
transform produces a new ray and never touches the original.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> ray = Ray(point(2, 3, 4), vector(1, 0, 0))
    >>> ray.position(2.5)
    Vec3(x=4.5, y=3.0, z=4.0, kind=<Kind.POINT: 0>)
"""

from dataclasses import dataclass

from whitted.core.matrix import Matrix
from whitted.core.tuples import Vec3
from whitted.errors import KindError


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector. Not required to be normalized;
            transformed rays generally are not, and ``t`` values stay
            consistent between world and local space because of that.
    """

    origin: Vec3
    direction: Vec3

    def __post_init__(self) -> None:
        if not self.origin.is_point():
            raise KindError(f"ray origin must be a point, got {self.origin.kind.name}")
        if not self.direction.is_vector():
            raise KindError(f"ray direction must be a vector, got {self.direction.kind.name}")

    def position(self, t: float) -> Vec3:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Negative values lie behind the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> "Ray":
        """Return a new ray with origin and direction multiplied by ``matrix``."""
        return Ray(matrix @ self.origin, matrix @ self.direction)
