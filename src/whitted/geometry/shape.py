"""Shape base type shared by every primitive.

A shape owns an optional transform (object space to its parent's space)
and a material. Shapes that belong to a group store the group's arena
handle in ``parent``; the handle is a plain integer, so the hierarchy never
holds references back up the tree.

Shapes compare by identity: two default spheres are different objects in
the scene even though all their fields match.
"""

import copy
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Optional

from whitted.core.matrix import Matrix, identity
from whitted.materials.material import Material

_IDENTITY = identity()


class ShapeKind(IntEnum):
    """Enumeration of shape variants.

    Used by ``geometry.dispatch`` to select the local intersection and
    normal functions for a shape.
    """

    SPHERE = 0
    PLANE = 1
    CUBE = 2
    CYLINDER = 3
    CONE = 4
    GROUP = 5


@dataclass(eq=False)
class Shape:
    """Fields common to every shape.

    Attributes:
        transform: Object-to-parent transform. None means identity.
        material: The shape's own material.
        parent: Arena handle of the enclosing group, if any.
        handle: This shape's arena handle once registered.
    """

    kind: ClassVar[ShapeKind]

    transform: Optional[Matrix] = None
    material: Material = field(default_factory=Material)
    parent: Optional[int] = None
    handle: Optional[int] = None

    @property
    def inverse(self) -> Matrix:
        """Inverse of the transform (identity when none is set).

        Raises:
            NotInvertibleError: If the transform is singular.
        """
        if self.transform is None:
            return _IDENTITY
        return self.transform.inverse()

    def clone(self) -> "Shape":
        """Copy the shape and its material, detached from any arena."""
        duplicate = copy.deepcopy(self)
        duplicate.parent = None
        duplicate.handle = None
        return duplicate
