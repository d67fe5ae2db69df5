"""Ray/scene intersection records and hit preparation.

The pipeline from a ray to something shadeable:

    1. ``intersect`` transforms the ray into each shape's object space and
       collects every crossing as an ``Intersection``.
    2. ``Intersections.hit`` picks the closest crossing in front of the
       ray origin.
    3. ``prepare_computations`` turns that hit into a ``Computations``
       record: the surface point, eye and normal vectors, offset points for
       secondary rays, and the refractive indices on either side.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry import Sphere
    >>> from whitted.scene.intersection import intersect
    >>> xs = intersect(Sphere(), Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> [i.t for i in xs]
    [4.0, 6.0]
    >>> xs.hit().t
    4.0
"""

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from whitted.config import EPSILON
from whitted.core.ray import Ray
from whitted.core.tuples import Vec3
from whitted.errors import SceneError
from whitted.geometry.dispatch import local_intersect, normal_at
from whitted.geometry.group import Group
from whitted.geometry.shape import Shape
from whitted.materials.material import VACUUM
from whitted.scene.arena import ShapeArena


@dataclass(frozen=True, eq=False)
class Intersection:
    """One crossing of a ray with a shape's surface.

    Compared by identity: two crossings of the same shape at the same t are
    still distinct records.

    Attributes:
        t: Ray parameter of the crossing.
        object: The primitive that was crossed (never a group).
    """

    t: float
    object: Shape


class Intersections:
    """An ordered collection of intersections."""

    def __init__(self, items: Iterable[Intersection] = ()) -> None:
        self._items: list[Intersection] = list(items)

    def push(self, intersection: Intersection) -> None:
        self._items.append(intersection)

    def extend(self, intersections: Iterable[Intersection]) -> None:
        self._items.extend(intersections)

    def sort(self) -> None:
        """Sort ascending by t. Stable, so equal t values keep insertion order."""
        self._items.sort(key=lambda i: i.t)

    def hit(self) -> Optional[Intersection]:
        """The intersection with the lowest positive t, or None.

        Crossings at t <= 0 are behind (or at) the ray origin and never hit.
        """
        visible = [i for i in self._items if i.t > 0.0]
        if not visible:
            return None
        # min() returns the first of equal minima, matching a stable sort
        return min(visible, key=lambda i: i.t)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Intersection:
        return self._items[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Intersections({[i.t for i in self._items]!r})"


# =============================================================================
# World-Space Intersection
# =============================================================================


def _collect(shape: Shape, ray: Ray, arena: Optional[ShapeArena], xs: Intersections) -> None:
    local_ray = ray.transform(shape.inverse)

    if isinstance(shape, Group):
        if not shape.children:
            return
        if arena is None:
            raise SceneError("intersecting a group with children requires its arena")
        for child in arena.children(shape.handle):
            _collect(child, local_ray, arena, xs)
        return

    for t in local_intersect(shape, local_ray):
        xs.push(Intersection(t, shape))


def intersect(shape: Shape, ray: Ray, arena: Optional[ShapeArena] = None) -> Intersections:
    """Intersect a world-space (or parent-space) ray with a shape.

    Groups are expanded through the arena: the ray is carried into the
    group's space and tested against every child there. The hits name the
    primitive children, never the group.

    Args:
        shape: Shape to test.
        ray: Ray in the space of the shape's parent.
        arena: Arena the shape's group children live in.

    Returns:
        Every crossing, sorted ascending by t.

    Raises:
        NotInvertibleError: If a transform on the way is singular.
    """
    xs = Intersections()
    _collect(shape, ray, arena, xs)
    xs.sort()
    return xs


# =============================================================================
# Hit Preparation
# =============================================================================


@dataclass
class Computations:
    """Everything the shader needs about a single hit.

    Attributes:
        t: Ray parameter of the hit.
        object: The shape that was hit.
        point: World-space hit point.
        eyev: Unit vector from the point back towards the eye.
        normalv: Unit surface normal, flipped to face the eye.
        inside: Whether the hit is on the inside of the surface.
        over_point: ``point`` nudged along the normal, the origin for
            shadow and reflection rays.
        under_point: ``point`` nudged against the normal, the origin for
            refraction rays.
        reflectv: Ray direction reflected about the normal.
        n1: Refractive index of the medium being left.
        n2: Refractive index of the medium being entered.
    """

    t: float
    object: Shape
    point: Vec3
    eyev: Vec3
    normalv: Vec3
    inside: bool
    over_point: Vec3
    under_point: Vec3
    reflectv: Vec3
    n1: float = VACUUM
    n2: float = VACUUM


def _refractive_indices(hit: Intersection, xs: Iterable[Intersection]) -> tuple[float, float]:
    """Indices on both sides of the hit, found by tracking which shapes contain it.

    Walking the intersections in order, each shape is entered at its first
    crossing and left at its next. The innermost open shape before and after
    the hit gives n1 and n2.
    """
    containers: list[Shape] = []
    n1 = n2 = VACUUM

    for i in xs:
        if i is hit:
            n1 = containers[-1].material.refractive_index if containers else VACUUM

        position = next((k for k, shape in enumerate(containers) if shape is i.object), None)
        if position is None:
            containers.append(i.object)
        else:
            del containers[position]

        if i is hit:
            n2 = containers[-1].material.refractive_index if containers else VACUUM
            break

    return n1, n2


def prepare_computations(
    hit: Intersection,
    ray: Ray,
    xs: Optional[Iterable[Intersection]] = None,
    arena: Optional[ShapeArena] = None,
) -> Computations:
    """Precompute the shading state for a hit.

    Args:
        hit: The intersection being shaded.
        ray: The ray that produced it.
        xs: All intersections along the ray, sorted, used to work out the
            refractive indices. Defaults to just the hit.
        arena: Arena holding the hit shape's ancestors, if it has any.

    Returns:
        The populated ``Computations``.
    """
    point = ray.position(hit.t)
    eyev = -ray.direction
    normalv = normal_at(hit.object, point, arena)

    inside = normalv.dot(eyev) < 0.0
    if inside:
        normalv = -normalv

    n1, n2 = _refractive_indices(hit, xs if xs is not None else [hit])

    return Computations(
        t=hit.t,
        object=hit.object,
        point=point,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        over_point=point + normalv * EPSILON,
        under_point=point - normalv * EPSILON,
        reflectv=ray.direction.reflect(normalv),
        n1=n1,
        n2=n2,
    )


def schlick(comps: Computations) -> float:
    """Schlick's approximation of the Fresnel reflectance at a hit.

    Returns:
        The fraction of light reflected, in [0, 1]. 1.0 under total
        internal reflection.
    """
    cos = comps.eyev.dot(comps.normalv)

    if comps.n1 > comps.n2:
        ratio = comps.n1 / comps.n2
        sin2_t = ratio * ratio * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5
