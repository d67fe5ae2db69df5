"""Geometry module.

Shape data types and their object-space intersection and normal functions.

Components:
    shape: Shape base type and ShapeKind enum
    sphere: Unit sphere at the origin
    plane: Infinite xz-plane
    cube: Axis-aligned [-1, 1] cube (slab method)
    cylinder: Truncatable, cappable unit cylinder, plus shared cap logic
    cone: Truncatable, cappable double-napped cone
    group: Container giving children a shared transform
    dispatch: Kind-based dispatch and object/world space conversion
"""

from .cone import Cone
from .cube import Cube
from .cylinder import CappedShape, Cylinder
from .dispatch import local_intersect, local_normal_at, normal_at, normal_to_world, world_to_object
from .group import Group
from .plane import Plane
from .shape import Shape, ShapeKind
from .sphere import Sphere

__all__ = [
    "Shape",
    "ShapeKind",
    "Sphere",
    "Plane",
    "Cube",
    "CappedShape",
    "Cylinder",
    "Cone",
    "Group",
    "local_intersect",
    "local_normal_at",
    "world_to_object",
    "normal_to_world",
    "normal_at",
]
