"""Tagged 3-component quantities: points, vectors and colours.

A single value type carries three components plus a kind tag. Operators
enforce the algebra of affine space by kind:

    point  - point  -> vector
    point  + vector -> point
    point  - vector -> point
    vector + vector -> vector
    colour + colour -> colour   (component-wise, likewise -, *)

Anything else, such as adding two points or subtracting a point from a
vector, raises ``KindError``.

Example:
    >>> from whitted.core.tuples import point, vector
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 0.0, 1.0)
    >>> p + v
    Vec3(x=1.0, y=2.0, z=4.0, kind=<Kind.POINT: 0>)
"""

import math
from dataclasses import dataclass
from enum import IntEnum
from numbers import Real

from whitted.config import EPSILON, PPM_MAX_COLOUR
from whitted.errors import KindError


class Kind(IntEnum):
    """Tag distinguishing the three interpretations of a 3-component value."""

    POINT = 0
    VECTOR = 1
    COLOUR = 2


# Result kind for each legal (left, right) operand pair
_ADD_KINDS = {
    (Kind.POINT, Kind.VECTOR): Kind.POINT,
    (Kind.VECTOR, Kind.POINT): Kind.POINT,
    (Kind.VECTOR, Kind.VECTOR): Kind.VECTOR,
    (Kind.COLOUR, Kind.COLOUR): Kind.COLOUR,
}

_SUB_KINDS = {
    (Kind.POINT, Kind.POINT): Kind.VECTOR,
    (Kind.POINT, Kind.VECTOR): Kind.POINT,
    (Kind.VECTOR, Kind.VECTOR): Kind.VECTOR,
    (Kind.COLOUR, Kind.COLOUR): Kind.COLOUR,
}


def _clamp_channel(value: float) -> int:
    """Clamp a channel to [0, 1] and scale it to the nearest integer in [0, 255]."""
    value = min(max(value, 0.0), 1.0)
    return int(math.floor(value * PPM_MAX_COLOUR + 0.5))


@dataclass(frozen=True)
class Vec3:
    """A point, free vector or colour.

    Attributes:
        x: First component (red channel for colours).
        y: Second component (green channel for colours).
        z: Third component (blue channel for colours).
        kind: Which of the three interpretations applies.
    """

    x: float
    y: float
    z: float
    kind: Kind = Kind.VECTOR

    @property
    def w(self) -> float:
        """Homogeneous coordinate: 1 for points, 0 for vectors and colours."""
        return 1.0 if self.kind == Kind.POINT else 0.0

    @property
    def red(self) -> float:
        return self.x

    @property
    def green(self) -> float:
        return self.y

    @property
    def blue(self) -> float:
        return self.z

    def is_point(self) -> bool:
        return self.kind == Kind.POINT

    def is_vector(self) -> bool:
        return self.kind == Kind.VECTOR

    def is_colour(self) -> bool:
        return self.kind == Kind.COLOUR

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        kind = _ADD_KINDS.get((self.kind, other.kind))
        if kind is None:
            raise KindError(f"cannot add a {other.kind.name.lower()} to a {self.kind.name.lower()}")
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z, kind)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        kind = _SUB_KINDS.get((self.kind, other.kind))
        if kind is None:
            raise KindError(
                f"cannot subtract a {other.kind.name.lower()} from a {self.kind.name.lower()}"
            )
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z, kind)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z, self.kind)

    def __mul__(self, other) -> "Vec3":
        if isinstance(other, Vec3):
            # Hadamard product, used to blend surface colour with light colour
            if not (self.is_colour() and other.is_colour()):
                raise KindError("component-wise product is only defined for colours")
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z, Kind.COLOUR)
        if isinstance(other, Real):
            return Vec3(self.x * other, self.y * other, self.z * other, self.kind)
        return NotImplemented

    def __rmul__(self, other) -> "Vec3":
        if isinstance(other, Real):
            return self.__mul__(other)
        return NotImplemented

    def __truediv__(self, scalar) -> "Vec3":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar, self.kind)

    # -------------------------------------------------------------------------
    # Vector operations
    # -------------------------------------------------------------------------

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Vec3":
        """Scale to unit length, keeping the kind.

        Raises:
            ZeroDivisionError: If the magnitude is zero.
        """
        return self / self.magnitude()

    def dot(self, other: "Vec3") -> float:
        """Dot product of two vectors.

        Raises:
            KindError: If either operand is not a vector.
        """
        if not (self.is_vector() and other.is_vector()):
            raise KindError("dot product is only defined for vectors")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        """Cross product of two vectors (right-handed).

        Raises:
            KindError: If either operand is not a vector.
        """
        if not (self.is_vector() and other.is_vector()):
            raise KindError("cross product is only defined for vectors")
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            Kind.VECTOR,
        )

    def reflect(self, normal: "Vec3") -> "Vec3":
        """Reflect this incoming vector about a unit normal."""
        return self - normal * (2.0 * self.dot(normal))

    # -------------------------------------------------------------------------
    # Comparison and output helpers
    # -------------------------------------------------------------------------

    def round(self, places: int = 5) -> "Vec3":
        """Round every component, keeping the kind. Used to compare in tests."""
        return Vec3(round(self.x, places), round(self.y, places), round(self.z, places), self.kind)

    def isclose(self, other: "Vec3", tolerance: float = EPSILON) -> bool:
        """Whether both values have the same kind and components within tolerance."""
        return (
            self.kind == other.kind
            and abs(self.x - other.x) < tolerance
            and abs(self.y - other.y) < tolerance
            and abs(self.z - other.z) < tolerance
        )

    def to_rgb8(self) -> tuple[int, int, int]:
        """Clamp each channel to [0, 1] and scale to integers in [0, 255]."""
        return (_clamp_channel(self.x), _clamp_channel(self.y), _clamp_channel(self.z))


def point(x: float, y: float, z: float) -> Vec3:
    """Create a position in space."""
    return Vec3(float(x), float(y), float(z), Kind.POINT)


def vector(x: float, y: float, z: float) -> Vec3:
    """Create a free vector (direction and magnitude, no position)."""
    return Vec3(float(x), float(y), float(z), Kind.VECTOR)


def colour(red: float, green: float, blue: float) -> Vec3:
    """Create a linear RGB colour."""
    return Vec3(float(red), float(green), float(blue), Kind.COLOUR)


BLACK = colour(0.0, 0.0, 0.0)
WHITE = colour(1.0, 1.0, 1.0)
