"""Phong surface material.

A material holds the reflectance coefficients used by the Phong lighting
model plus the reflective/refractive properties used by the recursive
shading in ``scene.world``. Each shape owns its material outright; cloning
a shape copies it.
"""

from dataclasses import dataclass, field
from typing import Optional

from whitted.core.tuples import WHITE, Vec3
from whitted.materials.pattern import Pattern

# Refractive indices of common media
VACUUM = 1.0
AIR = 1.00029
WATER = 1.333
GLASS = 1.5
DIAMOND = 2.417


@dataclass
class Material:
    """Phong material properties.

    Attributes:
        colour: Flat surface colour, used when no pattern is set.
        ambient: Fraction of light reflected regardless of geometry.
        diffuse: Lambertian reflectance coefficient.
        specular: Strength of the specular highlight.
        shininess: Specular exponent; larger is a tighter highlight.
        reflective: Weight of the mirror-reflected colour (0 = matte).
        transparency: Weight of the refracted colour (0 = opaque).
        refractive_index: Index of refraction of the medium inside the shape.
        pattern: Optional procedural colour replacing ``colour``.
    """

    colour: Vec3 = WHITE
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = VACUUM
    pattern: Optional[Pattern] = field(default=None)

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular", "shininess", "reflective", "transparency"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if self.refractive_index <= 0.0:
            raise ValueError(f"refractive_index must be positive, got {self.refractive_index}")
        if not self.colour.is_colour():
            raise ValueError(f"colour must be a colour, got {self.colour.kind.name}")

    @classmethod
    def glass(cls) -> "Material":
        """A fully transparent material with the index of glass."""
        return cls(transparency=1.0, refractive_index=GLASS)
