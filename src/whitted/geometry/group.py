"""Group container.

A group has no surface of its own. It gives a set of child shapes a shared
transform: the intersection engine transforms the ray into the group's
space once, then intersects each child there. Children are referenced by
arena handle, and each child records the group's handle as its parent.
"""

from dataclasses import dataclass, field
from typing import ClassVar

from whitted.core.ray import Ray
from whitted.core.tuples import Vec3
from whitted.errors import SceneError
from whitted.geometry.shape import Shape, ShapeKind


@dataclass(eq=False)
class Group(Shape):
    """A transformable collection of child shapes.

    Attributes:
        children: Arena handles of the direct children, in insertion order.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.GROUP

    children: list[int] = field(default_factory=list)

    def clone(self) -> "Group":
        """Copy the group's transform and material; the copy has no children."""
        duplicate = super().clone()
        duplicate.children = []
        return duplicate


def intersect_group(group: Group, ray: Ray) -> list[float]:
    raise SceneError(
        "a group has no surface of its own; intersect it through the scene arena "
        "so hits can name the child shape"
    )


def group_normal(group: Group, object_point: Vec3) -> Vec3:
    raise SceneError("a group has no surface normal; normals belong to its children")
