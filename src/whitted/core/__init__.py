"""Core numeric module.

This module contains the building blocks every other component works in:

Components:
    tuples: Tagged points, vectors and colours with kind-checked arithmetic
    matrix: Immutable square matrices, cofactor inverses, affine constructors
    ray: Ray data structure with position and transform helpers
"""

from .matrix import (
    Axis,
    Matrix,
    identity,
    rotation,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .ray import Ray
from .tuples import BLACK, WHITE, Kind, Vec3, colour, point, vector

__all__ = [
    "Vec3",
    "Kind",
    "point",
    "vector",
    "colour",
    "BLACK",
    "WHITE",
    "Matrix",
    "Axis",
    "identity",
    "translation",
    "scaling",
    "rotation",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    "Ray",
]
