"""Shape storage with integer handles.

Every shape in a scene lives in one ``ShapeArena``. ``add`` returns the
shape's handle, an index into the arena. Group membership is expressed with
handles in both directions: a group lists its children's handles and each
child stores its group's handle as ``parent``. Nothing holds an object
reference back up the tree, and because a shape can be added only once the
parent links always form a tree.

Example:
    >>> from whitted.geometry import Group, Sphere
    >>> from whitted.scene.arena import ShapeArena
    >>> arena = ShapeArena()
    >>> g = arena.add(Group())
    >>> s = arena.add(Sphere(), parent=g)
    >>> arena.get(s).parent == g
    True
"""

from typing import Iterator, Optional

from whitted.errors import SceneError
from whitted.geometry.group import Group
from whitted.geometry.shape import Shape


class ShapeArena:
    """Indexed storage for the shapes of one scene."""

    def __init__(self) -> None:
        self._shapes: list[Shape] = []

    def add(self, shape: Shape, parent: Optional[int] = None) -> int:
        """Register a shape, optionally as the last child of a group.

        Args:
            shape: The shape to store. It must not belong to any arena yet.
            parent: Handle of the enclosing group, or None for a root shape.

        Returns:
            The new shape's handle.

        Raises:
            SceneError: If the shape was already added, the parent handle is
                unknown, or the parent is not a group.
        """
        if shape.handle is not None:
            raise SceneError(f"shape is already registered with handle {shape.handle}")

        group = None
        if parent is not None:
            group = self.get(parent)
            if not isinstance(group, Group):
                raise SceneError(
                    f"parent handle {parent} is a {group.kind.name.lower()}, not a group"
                )

        handle = len(self._shapes)
        shape.handle = handle
        shape.parent = parent
        self._shapes.append(shape)
        if group is not None:
            group.children.append(handle)
        return handle

    def get(self, handle: int) -> Shape:
        """Look up a shape by handle.

        Raises:
            SceneError: If no shape has that handle.
        """
        if not 0 <= handle < len(self._shapes):
            raise SceneError(f"unknown shape handle {handle}")
        return self._shapes[handle]

    def children(self, handle: int) -> list[Shape]:
        """Direct children of a group, in insertion order. Empty for primitives."""
        shape = self.get(handle)
        if not isinstance(shape, Group):
            return []
        return [self._shapes[child] for child in shape.children]

    def ancestors(self, handle: int) -> list[Shape]:
        """Enclosing groups of a shape, innermost first."""
        result = []
        parent = self.get(handle).parent
        while parent is not None:
            group = self._shapes[parent]
            result.append(group)
            parent = group.parent
        return result

    def roots(self) -> list[Shape]:
        """Shapes with no parent, in insertion order."""
        return [shape for shape in self._shapes if shape.parent is None]

    def clear(self) -> None:
        """Remove every shape, releasing their handles."""
        for shape in self._shapes:
            shape.handle = None
            shape.parent = None
            if isinstance(shape, Group):
                shape.children.clear()
        self._shapes.clear()

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def __contains__(self, shape: Shape) -> bool:
        handle = shape.handle
        return handle is not None and handle < len(self._shapes) and self._shapes[handle] is shape
