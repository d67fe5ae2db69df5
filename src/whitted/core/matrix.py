"""Square matrices and 4x4 affine transforms.

Matrices are immutable, row-major and stored as float64 NumPy arrays. The
determinant and inverse are computed by cofactor expansion so that the
"not invertible" condition is exactly ``determinant == 0``, with no
tolerance.

Transforms compose right to left: in ``translation(...) @ scaling(...) @ p``
the scaling applies to ``p`` first.

Example:
    >>> import math
    >>> from whitted.core.matrix import Axis, rotation, scaling, translation
    >>> from whitted.core.tuples import point
    >>> m = translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation(Axis.X, math.pi / 2)
    >>> (m @ point(1, 0, 1)).round(5)
    Vec3(x=15.0, y=0.0, z=7.0, kind=<Kind.POINT: 0>)
"""

import logging
import math
from enum import IntEnum
from typing import Optional, Sequence, Union

import numpy as np
import numpy.typing as npt

from whitted.config import EPSILON
from whitted.core.tuples import Vec3
from whitted.errors import NotInvertibleError

logger = logging.getLogger(__name__)


class Axis(IntEnum):
    """Principal axis for ``rotation``."""

    X = 0
    Y = 1
    Z = 2


class Matrix:
    """An immutable N x N matrix of float64 values.

    Args:
        data: Rows of the matrix, either nested sequences or a 2-D array.

    Raises:
        ValueError: If the data is not a non-empty square 2-D array.
    """

    __slots__ = ("_data", "_inverse")

    def __init__(self, data: Union[Sequence[Sequence[float]], npt.NDArray[np.float64]]) -> None:
        array = np.array(data, dtype=np.float64)
        if array.ndim != 2 or array.shape[0] != array.shape[1] or array.shape[0] == 0:
            raise ValueError(f"Matrix must be square and non-empty, got shape {array.shape}")
        array.setflags(write=False)
        self._data = array
        self._inverse: Optional[Matrix] = None

    @property
    def size(self) -> int:
        """Number of rows (equal to the number of columns)."""
        return self._data.shape[0]

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self._data[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the underlying array."""
        return self._data.copy()

    def isclose(self, other: "Matrix", tolerance: float = EPSILON) -> bool:
        """Whether every element is within tolerance of ``other``'s."""
        return self.size == other.size and bool(
            np.all(np.abs(self._data - other._data) < tolerance)
        )

    def round(self, places: int = 5) -> "Matrix":
        return Matrix(np.round(self._data, places))

    # -------------------------------------------------------------------------
    # Products
    # -------------------------------------------------------------------------

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            if self.size != other.size:
                raise ValueError(
                    f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size} matrix"
                )
            return Matrix(self._data @ other._data)
        if isinstance(other, Vec3):
            if self.size != 4:
                raise ValueError("Only 4x4 matrices can transform points, vectors and colours")
            h = self._data @ np.array([other.x, other.y, other.z, other.w])
            return Vec3(float(h[0]), float(h[1]), float(h[2]), other.kind)
        return NotImplemented

    # -------------------------------------------------------------------------
    # Determinant and inverse
    # -------------------------------------------------------------------------

    def transpose(self) -> "Matrix":
        return Matrix(self._data.T)

    def submatrix(self, row: int, col: int) -> "Matrix":
        """The matrix with the given row and column removed."""
        reduced = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix(reduced)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return minor if (row + col) % 2 == 0 else -minor

    def determinant(self) -> float:
        """Determinant by cofactor expansion along row 0."""
        if self.size == 1:
            return float(self._data[0, 0])
        if self.size == 2:
            d = self._data
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        return sum(float(self._data[0, col]) * self.cofactor(0, col) for col in range(self.size))

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> "Matrix":
        """The inverse, built from the transposed cofactor matrix over the determinant.

        The result is cached, which is safe because matrices are immutable.

        Raises:
            NotInvertibleError: If the determinant is exactly zero.
        """
        if self._inverse is None:
            det = self.determinant()
            if det == 0.0:
                logger.debug("Refusing to invert singular matrix %r", self)
                raise NotInvertibleError(f"matrix is not invertible: {self!r}")
            n = self.size
            cofactors = np.array(
                [[self.cofactor(row, col) for col in range(n)] for row in range(n)],
                dtype=np.float64,
            )
            self._inverse = Matrix(cofactors.T / det)
        return self._inverse


# =============================================================================
# Named Constructors
# =============================================================================


def identity(size: int = 4) -> Matrix:
    return Matrix(np.eye(size))


def translation(x: float, y: float, z: float) -> Matrix:
    m = np.eye(4)
    m[0, 3] = x
    m[1, 3] = y
    m[2, 3] = z
    return Matrix(m)


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix(np.diag([x, y, z, 1.0]))


def rotation(axis: Axis, angle: float) -> Matrix:
    """Rotation by ``angle`` radians about a principal axis (left-handed, as seen
    looking down the positive axis toward the origin)."""
    c = math.cos(angle)
    s = math.sin(angle)
    m = np.eye(4)
    if axis == Axis.X:
        m[1, 1], m[1, 2] = c, -s
        m[2, 1], m[2, 2] = s, c
    elif axis == Axis.Y:
        m[0, 0], m[0, 2] = c, s
        m[2, 0], m[2, 2] = -s, c
    elif axis == Axis.Z:
        m[0, 0], m[0, 1] = c, -s
        m[1, 0], m[1, 1] = s, c
    else:
        raise ValueError(f"Unknown axis: {axis!r}")
    return Matrix(m)


def rotation_x(angle: float) -> Matrix:
    return rotation(Axis.X, angle)


def rotation_y(angle: float) -> Matrix:
    return rotation(Axis.Y, angle)


def rotation_z(angle: float) -> Matrix:
    return rotation(Axis.Z, angle)


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each coordinate in proportion to the other two.

    ``xy`` moves x in proportion to y, ``xz`` moves x in proportion to z,
    and so on.
    """
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(from_point: Vec3, to_point: Vec3, up: Vec3) -> Matrix:
    """Orient the world relative to an eye at ``from_point`` looking at ``to_point``.

    Builds forward, left and true-up basis vectors, then moves the scene so
    the eye sits at the origin.

    Args:
        from_point: Eye position.
        to_point: Point the eye looks at.
        up: Approximate up direction; need not be orthogonal to the view.

    Returns:
        The world-to-camera transform.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)
