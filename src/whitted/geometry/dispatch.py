"""Shape dispatch and object/world space conversion.

Each primitive implements two object-space functions:

    intersect_<kind>(shape, ray) -> list[float]
    <kind>_normal(shape, object_point) -> Vec3

They are looked up here by ``ShapeKind``. Both tables must cover every
kind, which is checked when the module is imported.

The space conversions walk the parent handles stored on shapes, so they
take the ``ShapeArena`` the shape was registered in. A shape without a
parent needs no arena.

Example:
    >>> from whitted.core.matrix import translation
    >>> from whitted.core.tuples import point
    >>> from whitted.geometry.dispatch import normal_at
    >>> from whitted.geometry.sphere import Sphere
    >>> s = Sphere(transform=translation(0, 1, 0))
    >>> normal_at(s, point(0, 1, -1)).round()
    Vec3(x=0.0, y=0.0, z=-1.0, kind=<Kind.VECTOR: 1>)
"""

from typing import TYPE_CHECKING, Callable, Optional

from whitted.core.ray import Ray
from whitted.core.tuples import Vec3, vector
from whitted.errors import SceneError
from whitted.geometry.cone import cone_normal, intersect_cone
from whitted.geometry.cube import cube_normal, intersect_cube
from whitted.geometry.cylinder import cylinder_normal, intersect_cylinder
from whitted.geometry.group import group_normal, intersect_group
from whitted.geometry.plane import intersect_plane, plane_normal
from whitted.geometry.shape import Shape, ShapeKind
from whitted.geometry.sphere import intersect_sphere, sphere_normal

if TYPE_CHECKING:
    from whitted.scene.arena import ShapeArena


_INTERSECTORS: dict[ShapeKind, Callable[[Shape, Ray], list[float]]] = {
    ShapeKind.SPHERE: intersect_sphere,
    ShapeKind.PLANE: intersect_plane,
    ShapeKind.CUBE: intersect_cube,
    ShapeKind.CYLINDER: intersect_cylinder,
    ShapeKind.CONE: intersect_cone,
    ShapeKind.GROUP: intersect_group,
}

_NORMALS: dict[ShapeKind, Callable[[Shape, Vec3], Vec3]] = {
    ShapeKind.SPHERE: sphere_normal,
    ShapeKind.PLANE: plane_normal,
    ShapeKind.CUBE: cube_normal,
    ShapeKind.CYLINDER: cylinder_normal,
    ShapeKind.CONE: cone_normal,
    ShapeKind.GROUP: group_normal,
}

for _table in (_INTERSECTORS, _NORMALS):
    _missing = set(ShapeKind) - set(_table)
    if _missing:
        raise ImportError(f"shape dispatch has no entry for {sorted(k.name for k in _missing)}")


# =============================================================================
# Object-Space Dispatch
# =============================================================================


def local_intersect(shape: Shape, ray: Ray) -> list[float]:
    """Intersect an object-space ray with the shape's canonical geometry.

    Returns:
        The t values of every crossing, not necessarily sorted.
    """
    return _INTERSECTORS[shape.kind](shape, ray)


def local_normal_at(shape: Shape, object_point: Vec3) -> Vec3:
    """Unnormalised object-space normal at a point on the shape."""
    return _NORMALS[shape.kind](shape, object_point)


# =============================================================================
# Space Conversion
# =============================================================================


def _parent_of(shape: Shape, arena: Optional["ShapeArena"]) -> Optional[Shape]:
    if shape.parent is None:
        return None
    if arena is None:
        raise SceneError(
            f"shape has parent handle {shape.parent} but no arena was given to resolve it"
        )
    return arena.get(shape.parent)


def world_to_object(shape: Shape, world_point: Vec3, arena: Optional["ShapeArena"] = None) -> Vec3:
    """Convert a world-space point into the shape's object space.

    Ancestors are applied outermost first, then the shape's own inverse.
    """
    parent = _parent_of(shape, arena)
    if parent is not None:
        world_point = world_to_object(parent, world_point, arena)
    return shape.inverse @ world_point


def normal_to_world(shape: Shape, object_normal: Vec3, arena: Optional["ShapeArena"] = None) -> Vec3:
    """Convert an object-space normal to a unit world-space normal.

    The normal is multiplied by the transpose of the inverse at each level,
    renormalised, then passed up to the parent.
    """
    n = shape.inverse.transpose() @ object_normal
    # The translation column leaks into w; rebuilding as a vector drops it
    normal = vector(n.x, n.y, n.z).normalize()

    parent = _parent_of(shape, arena)
    if parent is not None:
        normal = normal_to_world(parent, normal, arena)
    return normal


def normal_at(shape: Shape, world_point: Vec3, arena: Optional["ShapeArena"] = None) -> Vec3:
    """Unit world-space surface normal at a world-space point on the shape.

    Raises:
        NotInvertibleError: If the shape or an ancestor has a singular transform.
        SceneError: If the shape is a group, or has a parent and no arena.
    """
    object_point = world_to_object(shape, world_point, arena)
    object_normal = local_normal_at(shape, object_point)
    return normal_to_world(shape, object_normal, arena)
