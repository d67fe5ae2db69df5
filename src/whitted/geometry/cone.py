"""Double-napped cone primitive.

In object space the cone is x^2 + z^2 = y^2: two nappes meeting at the
origin, with radius |y| at height y. Truncation and caps work as for the
cylinder, except each cap's radius is the |y| of its height.

The side quadratic is:

    a = dx^2 - dy^2 + dz^2
    b = 2 * (ox*dx - oy*dy + oz*dz)
    c = ox^2 - oy^2 + oz^2

Unlike the cylinder, ``a`` vanishes for any ray parallel to one of the
nappes while ``b`` does not; the equation is then linear with a single
root at t = -c / 2b.
"""

import math
from dataclasses import dataclass
from typing import ClassVar

from whitted.config import EPSILON
from whitted.core.ray import Ray
from whitted.core.tuples import Vec3, vector
from whitted.geometry.cylinder import CappedShape, intersect_caps, within_bounds
from whitted.geometry.shape import ShapeKind


@dataclass(eq=False)
class Cone(CappedShape):
    """A double-napped cone around the object-space y axis."""

    kind: ClassVar[ShapeKind] = ShapeKind.CONE


def _cap_radius_squared(y: float) -> float:
    return y * y


def intersect_cone(cone: Cone, ray: Ray) -> list[float]:
    d = ray.direction
    o = ray.origin

    a = d.x * d.x - d.y * d.y + d.z * d.z
    b = 2.0 * o.x * d.x - 2.0 * o.y * d.y + 2.0 * o.z * d.z
    c = o.x * o.x - o.y * o.y + o.z * o.z

    a_vanishes = abs(a) < EPSILON
    if a_vanishes and abs(b) < EPSILON:
        return intersect_caps(cone, ray, _cap_radius_squared)

    xs = []
    if a_vanishes:
        t = -c / (2.0 * b)
        if within_bounds(cone, ray, t):
            xs.append(t)
    else:
        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        if t0 > t1:
            t0, t1 = t1, t0

        for t in (t0, t1):
            if within_bounds(cone, ray, t):
                xs.append(t)

    xs.extend(intersect_caps(cone, ray, _cap_radius_squared))
    return xs


def cone_normal(cone: Cone, object_point: Vec3) -> Vec3:
    x, y, z = object_point
    dist = x * x + z * z

    if dist < y * y and y >= cone.maximum - EPSILON:
        return vector(0.0, 1.0, 0.0)
    if dist < y * y and y <= cone.minimum + EPSILON:
        return vector(0.0, -1.0, 0.0)

    # The apex has no tangent plane; point along the axis, away from the nappe
    if dist < EPSILON * EPSILON:
        return vector(0.0, -1.0, 0.0) if y > 0.0 else vector(0.0, 1.0, 0.0)

    # Slope of the side is 45 degrees, so the y component equals the radius,
    # pointing down on the upper nappe and up on the lower one
    normal_y = math.sqrt(dist)
    if y > 0.0:
        normal_y = -normal_y
    return vector(x, normal_y, z)
