"""Exception types raised by the ray tracer."""


class RayTracerError(Exception):
    """Base class for all ray tracer errors."""


class NotInvertibleError(RayTracerError, ArithmeticError):
    """Raised when inverting a matrix whose determinant is exactly zero.

    A singular transform means the scene data is malformed. Any ray whose
    evaluation needs the inverse (local-space intersection, normals,
    pattern lookup) fails with this error.
    """


class KindError(RayTracerError, TypeError):
    """Raised for arithmetic that is illegal for the operands' kinds.

    Examples are adding two points or taking the dot product of colours.
    """


class SceneError(RayTracerError, ValueError):
    """Raised for a malformed shape hierarchy."""
