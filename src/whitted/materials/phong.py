"""Phong reflection model.

Local illumination at a surface point from a single point light:

    effective = surface_colour * light.intensity
    ambient   = effective * material.ambient
    diffuse   = effective * material.diffuse * dot(lightv, normalv)
    specular  = light.intensity * material.specular
                * dot(reflectv, eyev) ** material.shininess

Diffuse and specular are dropped when the light is behind the surface,
and specular alone when the reflection points away from the eye. A point
in shadow gets the ambient term only.

Note: Not imported from ``materials/__init__.py``; this module depends on
``geometry`` (for object-space conversion), which in turn depends on
``materials.material``.
"""

from typing import TYPE_CHECKING, Optional

from whitted.core.tuples import BLACK, Vec3
from whitted.geometry.dispatch import world_to_object
from whitted.geometry.shape import Shape
from whitted.materials.material import Material
from whitted.materials.pattern import Pattern

if TYPE_CHECKING:
    from whitted.scene.arena import ShapeArena
    from whitted.scene.light import PointLight


def pattern_at_shape(
    pattern: Pattern,
    shape: Shape,
    world_point: Vec3,
    arena: Optional["ShapeArena"] = None,
) -> Vec3:
    """Evaluate a pattern on a shape at a world-space point.

    The point is taken into the shape's object space (through any enclosing
    groups), then into pattern space, so the pattern moves with the shape.
    """
    object_point = world_to_object(shape, world_point, arena)
    pattern_point = pattern.inverse @ object_point
    return pattern.at(pattern_point)


def lighting(
    material: Material,
    shape: Shape,
    light: "PointLight",
    point: Vec3,
    eyev: Vec3,
    normalv: Vec3,
    in_shadow: bool,
    arena: Optional["ShapeArena"] = None,
) -> Vec3:
    """Phong colour at a surface point.

    Args:
        material: Surface material.
        shape: The shape being lit, used to place the material's pattern.
        light: The light source.
        point: World-space surface point.
        eyev: Unit vector towards the eye.
        normalv: Unit surface normal.
        in_shadow: Whether the light is blocked from ``point``.
        arena: Arena holding the shape's ancestors, if it has any.

    Returns:
        The lit colour. Not clamped; channels may exceed 1.
    """
    if material.pattern is not None:
        surface = pattern_at_shape(material.pattern, shape, point, arena)
    else:
        surface = material.colour

    effective = surface * light.intensity
    ambient = effective * material.ambient
    if in_shadow:
        return ambient

    lightv = (light.position - point).normalize()
    light_dot_normal = lightv.dot(normalv)
    if light_dot_normal < 0.0:
        return ambient

    diffuse = effective * (material.diffuse * light_dot_normal)

    reflectv = (-lightv).reflect(normalv)
    reflect_dot_eye = reflectv.dot(eyev)
    if reflect_dot_eye <= 0.0:
        specular = BLACK
    else:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * (material.specular * factor)

    return ambient + diffuse + specular
