"""Materials module for surface appearance.

Components:
    material: Phong reflectance coefficients plus reflectivity, transparency
        and refractive index
    pattern: Two-colour procedural patterns (stripe, ring, gradient,
        checker) with their own transforms
    noise: Seeded 3-D gradient noise used to perturb pattern lookups
    phong: The Phong lighting model (ambient + diffuse + specular)

Note: phong is NOT imported here because it depends on the geometry
package, which itself imports Material. Import it directly:
    from whitted.materials.phong import lighting
"""

from .material import AIR, DIAMOND, GLASS, VACUUM, WATER, Material
from .noise import noise
from .pattern import Pattern, PatternKind

__all__ = [
    "Material",
    "VACUUM",
    "AIR",
    "WATER",
    "GLASS",
    "DIAMOND",
    "Pattern",
    "PatternKind",
    "noise",
]
