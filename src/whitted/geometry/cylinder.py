"""Cylinder primitive and the end-cap logic shared with cones.

In object space the cylinder has radius 1 around the y axis. It may be
truncated to ``minimum < y < maximum`` (both bounds exclusive) and, when
``closed``, capped with flat disks at those heights.

Side intersection solves a quadratic in x and z only:

    a = dx^2 + dz^2
    b = 2 * (ox*dx + oz*dz)
    c = ox^2 + oz^2 - 1

A ray parallel to the y axis has a ~ 0 and can only hit the caps.
"""

import math
from dataclasses import dataclass
from typing import Callable, ClassVar

from whitted.config import EPSILON
from whitted.core.ray import Ray
from whitted.core.tuples import Vec3, vector
from whitted.geometry.shape import Shape, ShapeKind


@dataclass(eq=False)
class CappedShape(Shape):
    """A shape truncated along y with optional flat end caps.

    Attributes:
        minimum: Lower y bound (exclusive).
        maximum: Upper y bound (exclusive).
        closed: Whether the truncated ends are capped.
    """

    minimum: float = -math.inf
    maximum: float = math.inf
    closed: bool = False


@dataclass(eq=False)
class Cylinder(CappedShape):
    """A radius-1 cylinder around the object-space y axis."""

    kind: ClassVar[ShapeKind] = ShapeKind.CYLINDER


def within_bounds(shape: CappedShape, ray: Ray, t: float) -> bool:
    """Whether the ray at ``t`` lies strictly between the shape's y bounds."""
    y = ray.origin.y + t * ray.direction.y
    return shape.minimum < y < shape.maximum


def _check_cap(ray: Ray, t: float, radius_squared: float) -> bool:
    x = ray.origin.x + t * ray.direction.x
    z = ray.origin.z + t * ray.direction.z
    return x * x + z * z <= radius_squared


def intersect_caps(
    shape: CappedShape,
    ray: Ray,
    cap_radius_squared: Callable[[float], float],
) -> list[float]:
    """Intersect the end caps of a closed shape.

    Args:
        shape: The capped shape.
        ray: The ray in object space.
        cap_radius_squared: Squared cap radius as a function of the cap's y.

    Returns:
        t values for the lower cap then the upper cap, for each one hit.
    """
    if not shape.closed or abs(ray.direction.y) < EPSILON:
        return []

    xs = []
    for y in (shape.minimum, shape.maximum):
        t = (y - ray.origin.y) / ray.direction.y
        if _check_cap(ray, t, cap_radius_squared(y)):
            xs.append(t)
    return xs


def _unit_radius_squared(y: float) -> float:
    return 1.0


def intersect_cylinder(cylinder: Cylinder, ray: Ray) -> list[float]:
    d = ray.direction
    o = ray.origin
    xs = []

    a = d.x * d.x + d.z * d.z
    if abs(a) >= EPSILON:
        b = 2.0 * o.x * d.x + 2.0 * o.z * d.z
        c = o.x * o.x + o.z * o.z - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        if t0 > t1:
            t0, t1 = t1, t0

        for t in (t0, t1):
            if within_bounds(cylinder, ray, t):
                xs.append(t)

    xs.extend(intersect_caps(cylinder, ray, _unit_radius_squared))
    return xs


def cylinder_normal(cylinder: Cylinder, object_point: Vec3) -> Vec3:
    dist = object_point.x * object_point.x + object_point.z * object_point.z

    if dist < 1.0 and object_point.y >= cylinder.maximum - EPSILON:
        return vector(0.0, 1.0, 0.0)
    if dist < 1.0 and object_point.y <= cylinder.minimum + EPSILON:
        return vector(0.0, -1.0, 0.0)
    return vector(object_point.x, 0.0, object_point.z)
