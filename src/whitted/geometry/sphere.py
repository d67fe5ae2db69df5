"""Unit sphere primitive.

In object space the sphere is centred on the origin with radius 1; size
and position come from the shape's transform.

Substituting the ray ``o + t*d`` into ``|p|^2 = 1`` gives the quadratic:

    a*t^2 + b*t + c = 0

where:
    a = dot(d, d)
    b = 2 * dot(d, o - origin)
    c = dot(o - origin, o - origin) - 1

A negative discriminant is a miss. A tangent ray yields the same root
twice; a ray starting inside yields one negative and one positive root.
"""

import math
from dataclasses import dataclass
from typing import ClassVar

from whitted.core.ray import Ray
from whitted.core.tuples import Vec3, point
from whitted.geometry.shape import Shape, ShapeKind
from whitted.materials.material import Material

ORIGIN = point(0.0, 0.0, 0.0)


@dataclass(eq=False)
class Sphere(Shape):
    """A unit sphere at the object-space origin."""

    kind: ClassVar[ShapeKind] = ShapeKind.SPHERE

    @classmethod
    def glass(cls) -> "Sphere":
        """A sphere with a transparent, refractive glass material."""
        return cls(material=Material.glass())


def intersect_sphere(sphere: Sphere, ray: Ray) -> list[float]:
    """Intersect an object-space ray with the unit sphere.

    Args:
        sphere: The sphere (unused beyond dispatch; geometry is canonical).
        ray: The ray in the sphere's object space.

    Returns:
        Zero or two t values in ascending order.
    """
    sphere_to_ray = ray.origin - ORIGIN
    a = ray.direction.dot(ray.direction)
    b = 2.0 * ray.direction.dot(sphere_to_ray)
    c = sphere_to_ray.dot(sphere_to_ray) - 1.0

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return []

    sqrt_d = math.sqrt(discriminant)
    t1 = (-b - sqrt_d) / (2.0 * a)
    t2 = (-b + sqrt_d) / (2.0 * a)
    return [t1, t2]


def sphere_normal(sphere: Sphere, object_point: Vec3) -> Vec3:
    """Outward normal at an object-space point on the unit sphere."""
    return object_point - ORIGIN
