"""Axis-aligned cube primitive.

In object space the cube spans [-1, 1] on every axis. Intersection uses
the slab method: each pair of parallel faces bounds an interval of t, and
the ray is inside the cube on the overlap of all three intervals.
"""

import math
from dataclasses import dataclass
from typing import ClassVar

from whitted.config import EPSILON
from whitted.core.ray import Ray
from whitted.core.tuples import Vec3, vector
from whitted.geometry.shape import Shape, ShapeKind


@dataclass(eq=False)
class Cube(Shape):
    """The [-1, 1]^3 cube in object space."""

    kind: ClassVar[ShapeKind] = ShapeKind.CUBE


def check_axis(origin: float, direction: float) -> tuple[float, float]:
    """Entry and exit t for the slab between -1 and 1 on one axis.

    A direction of (nearly) zero means the ray never crosses the slab's
    faces. If the origin lies within the slab (faces included) the bounds
    are infinite so the other axes decide; otherwise the interval is empty.

    Returns:
        (tmin, tmax), with tmin > tmax only for an empty interval.
    """
    if abs(direction) < EPSILON:
        if -1.0 <= origin <= 1.0:
            return -math.inf, math.inf
        return math.inf, -math.inf

    tmin = (-1.0 - origin) / direction
    tmax = (1.0 - origin) / direction

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


def intersect_cube(cube: Cube, ray: Ray) -> list[float]:
    xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x)
    ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y)
    ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z)

    tmin = max(xtmin, ytmin, ztmin)
    tmax = min(xtmax, ytmax, ztmax)

    if tmin > tmax:
        return []
    return [tmin, tmax]


def cube_normal(cube: Cube, object_point: Vec3) -> Vec3:
    """Normal of the face containing the point: the axis of largest magnitude."""
    ax, ay, az = abs(object_point.x), abs(object_point.y), abs(object_point.z)
    maxc = max(ax, ay, az)

    if maxc == ax:
        return vector(object_point.x, 0.0, 0.0)
    if maxc == ay:
        return vector(0.0, object_point.y, 0.0)
    return vector(0.0, 0.0, object_point.z)
