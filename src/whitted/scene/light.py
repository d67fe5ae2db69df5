"""Point light source."""

from dataclasses import dataclass

from whitted.core.tuples import Vec3
from whitted.errors import KindError


@dataclass(frozen=True)
class PointLight:
    """A light with no size, emitting equally in every direction.

    Attributes:
        position: Where the light sits in world space.
        intensity: Colour and brightness of the light.
    """

    position: Vec3
    intensity: Vec3

    def __post_init__(self) -> None:
        if not self.position.is_point():
            raise KindError(f"light position must be a point, got {self.position.kind.name}")
        if not self.intensity.is_colour():
            raise KindError(f"light intensity must be a colour, got {self.intensity.kind.name}")
