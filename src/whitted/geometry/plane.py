"""Infinite plane primitive.

In object space the plane is y = 0 (the xz-plane) with normal +y. A ray
whose direction has (almost) no y component is parallel or coplanar and
never hits it.
"""

from dataclasses import dataclass
from typing import ClassVar

from whitted.config import EPSILON
from whitted.core.ray import Ray
from whitted.core.tuples import Vec3, vector
from whitted.geometry.shape import Shape, ShapeKind

_UP = vector(0.0, 1.0, 0.0)


@dataclass(eq=False)
class Plane(Shape):
    """The xz-plane in object space."""

    kind: ClassVar[ShapeKind] = ShapeKind.PLANE


def intersect_plane(plane: Plane, ray: Ray) -> list[float]:
    if abs(ray.direction.y) < EPSILON:
        return []
    return [-ray.origin.y / ray.direction.y]


def plane_normal(plane: Plane, object_point: Vec3) -> Vec3:
    return _UP
