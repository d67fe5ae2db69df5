"""Scene container and recursive Whitted shading.

A ``World`` holds one point light and the shapes of a scene. Shading a
hit adds three contributions:

    surface:   Phong lighting at the hit, ambient only when shadowed
    reflected: colour seen along the mirror direction, times ``reflective``
    refracted: colour seen through the surface (Snell's law), times
               ``transparency``

For materials that are both reflective and transparent the last two are
weighted by the Fresnel reflectance from ``schlick`` instead.

Secondary rays carry a ``remaining`` bounce budget that decreases by one
per bounce; at zero they contribute black, which bounds the recursion even
between facing mirrors.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.scene.presets import default_world
    >>> world = default_world()
    >>> world.colour_at(Ray(point(0, 0, -5), vector(0, 0, 1))).round()
    Vec3(x=0.38066, y=0.47583, z=0.2855, kind=<Kind.COLOUR: 2>)
"""

import logging
import math
from typing import Iterator, Optional

from whitted.config import MAX_DEPTH
from whitted.core.ray import Ray
from whitted.core.tuples import BLACK, WHITE, Vec3, point
from whitted.geometry.shape import Shape
from whitted.materials.phong import lighting
from whitted.scene.arena import ShapeArena
from whitted.scene.intersection import (
    Computations,
    Intersections,
    intersect,
    prepare_computations,
    schlick,
)
from whitted.scene.light import PointLight

logger = logging.getLogger(__name__)


def default_light() -> PointLight:
    """White light up, left and in front of the origin."""
    return PointLight(point(-10.0, 10.0, -10.0), WHITE)


class World:
    """A light and a collection of shapes.

    Attributes:
        light: The scene's single point light.
        arena: Storage for every shape, including group children.
        objects: Handles of the root shapes, in insertion order.
    """

    def __init__(self, light: Optional[PointLight] = None) -> None:
        self.light = light if light is not None else default_light()
        self.arena = ShapeArena()
        self.objects: list[int] = []

    # -------------------------------------------------------------------------
    # Scene construction
    # -------------------------------------------------------------------------

    def add(self, shape: Shape, parent: Optional[int] = None) -> int:
        """Add a shape to the scene.

        Args:
            shape: The shape to add.
            parent: Handle of an already-added group to nest the shape in.
                None adds it at the top level.

        Returns:
            The shape's handle.
        """
        handle = self.arena.add(shape, parent)
        if parent is None:
            self.objects.append(handle)
        logger.debug("Added %s with handle %d (parent %s)", shape.kind.name, handle, parent)
        return handle

    @property
    def shapes(self) -> Iterator[Shape]:
        """Top-level shapes, in insertion order."""
        return (self.arena.get(handle) for handle in self.objects)

    # -------------------------------------------------------------------------
    # Ray queries
    # -------------------------------------------------------------------------

    def intersect(self, ray: Ray) -> Intersections:
        """Every crossing of the ray with the scene, sorted by t."""
        xs = Intersections()
        for shape in self.shapes:
            xs.extend(intersect(shape, ray, self.arena))
        xs.sort()
        return xs

    def is_shadowed(self, world_point: Vec3) -> bool:
        """Whether any shape lies between the point and the light."""
        to_light = self.light.position - world_point
        distance = to_light.magnitude()
        hit = self.intersect(Ray(world_point, to_light.normalize())).hit()
        return hit is not None and hit.t < distance

    # -------------------------------------------------------------------------
    # Shading
    # -------------------------------------------------------------------------

    def shade_hit(self, comps: Computations, remaining: int = MAX_DEPTH) -> Vec3:
        """Total colour at a prepared hit."""
        material = comps.object.material
        surface = lighting(
            material,
            comps.object,
            self.light,
            comps.over_point,
            comps.eyev,
            comps.normalv,
            self.is_shadowed(comps.over_point),
            self.arena,
        )
        reflected = self.reflected_colour(comps, remaining)
        refracted = self.refracted_colour(comps, remaining)

        if material.reflective > 0.0 and material.transparency > 0.0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)
        return surface + reflected + refracted

    def reflected_colour(self, comps: Computations, remaining: int = MAX_DEPTH) -> Vec3:
        """Colour arriving along the mirror direction, scaled by ``reflective``."""
        reflective = comps.object.material.reflective
        if remaining <= 0 or reflective == 0.0:
            return BLACK

        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.colour_at(reflect_ray, remaining - 1) * reflective

    def refracted_colour(self, comps: Computations, remaining: int = MAX_DEPTH) -> Vec3:
        """Colour arriving through the surface, scaled by ``transparency``.

        Black under total internal reflection, when Snell's law has no
        solution.
        """
        transparency = comps.object.material.transparency
        if remaining <= 0 or transparency == 0.0:
            return BLACK

        ratio = comps.n1 / comps.n2
        cos_i = comps.eyev.dot(comps.normalv)
        sin2_t = ratio * ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (ratio * cos_i - cos_t) - comps.eyev * ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.colour_at(refract_ray, remaining - 1) * transparency

    def colour_at(self, ray: Ray, remaining: int = MAX_DEPTH) -> Vec3:
        """Colour seen along a ray. Black when it hits nothing.

        Raises:
            NotInvertibleError: If a shape on the ray's path has a singular
                transform.
        """
        xs = self.intersect(ray)
        hit = xs.hit()
        if hit is None:
            return BLACK
        comps = prepare_computations(hit, ray, xs, self.arena)
        return self.shade_hit(comps, remaining)

    def __len__(self) -> int:
        return len(self.arena)
