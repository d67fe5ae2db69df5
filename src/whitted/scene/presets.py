"""Ready-made scenes.

``default_world`` is the two-sphere reference scene that shading and
camera behaviour is checked against. ``create_showcase_scene`` builds a
larger scene that exercises every primitive, patterns, reflection and
refraction, together with a camera framing it.

Example:
    >>> from whitted.scene.presets import create_showcase_scene
    >>> world, camera = create_showcase_scene()
    >>> canvas = camera.render(world)
"""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from whitted.core.matrix import rotation_x, rotation_y, rotation_z, scaling, translation, view_transform
from whitted.core.tuples import WHITE, colour, point, vector
from whitted.geometry import Cone, Cube, Cylinder, Group, Plane, Sphere
from whitted.materials.material import Material
from whitted.materials.pattern import Pattern
from whitted.scene.light import PointLight
from whitted.scene.world import World, default_light

if TYPE_CHECKING:
    from whitted.camera.camera import Camera


# =============================================================================
# Reference Scene
# =============================================================================


def default_world() -> World:
    """Two concentric spheres lit from (-10, 10, -10).

    The outer unit sphere is a matte green-yellow; the inner one is a
    default-material sphere scaled by 0.5.
    """
    world = World(default_light())

    outer = Sphere(material=Material(colour=colour(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))

    world.add(outer)
    world.add(inner)
    return world


# =============================================================================
# Showcase Scene
# =============================================================================


@dataclass
class ShowcaseParams:
    """Parameters for the showcase scene.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        field_of_view: Camera field of view in radians.
        floor_reflective: Reflectivity of the checkered floor.
        light_position: World-space position of the point light.
    """

    width: int = 200
    height: int = 100
    field_of_view: float = math.pi / 3.0
    floor_reflective: float = 0.3
    light_position: tuple[float, float, float] = (-10.0, 10.0, -10.0)


def create_showcase_scene(params: ShowcaseParams | None = None) -> tuple[World, "Camera"]:
    """Build the showcase scene and a camera looking at it.

    Contents:
    - Checkered reflective floor and a striped back wall
    - Glass sphere in the middle
    - Ring-patterned sphere on the left
    - Group holding a capped cylinder and a truncated mirror cone,
      tilted as one unit on the right
    - Small cube resting in front

    Args:
        params: Optional overrides; defaults to ``ShowcaseParams()``.

    Returns:
        A tuple of (World, Camera).
    """
    from whitted.camera.camera import Camera

    if params is None:
        params = ShowcaseParams()

    world = World(PointLight(point(*params.light_position), WHITE))

    # =========================================================================
    # Floor and wall
    # =========================================================================

    floor = Plane(
        material=Material(
            pattern=Pattern.checker(colour(0.9, 0.9, 0.9), colour(0.1, 0.1, 0.1)),
            specular=0.3,
            reflective=params.floor_reflective,
        )
    )
    world.add(floor)

    stripes = Pattern.stripe(colour(0.6, 0.7, 0.9), colour(0.9, 0.9, 1.0), perturb=True)
    stripes.transform = scaling(0.5, 0.5, 0.5)
    back_wall = Plane(
        transform=translation(0.0, 0.0, 6.0) @ rotation_x(math.pi / 2.0),
        material=Material(pattern=stripes, ambient=0.3, specular=0.0),
    )
    world.add(back_wall)

    # =========================================================================
    # Spheres
    # =========================================================================

    glass = Sphere.glass()
    glass.transform = translation(-0.5, 1.0, 0.5)
    glass.material.colour = colour(0.05, 0.05, 0.1)
    glass.material.diffuse = 0.1
    glass.material.reflective = 0.9
    glass.material.shininess = 300.0
    world.add(glass)

    rings = Pattern.ring(colour(1.0, 0.8, 0.1), colour(0.8, 0.3, 0.1))
    rings.transform = scaling(0.2, 0.2, 0.2) @ rotation_z(math.pi / 4.0)
    left = Sphere(
        transform=translation(-1.8, 0.4, -0.8) @ scaling(0.4, 0.4, 0.4),
        material=Material(pattern=rings, diffuse=0.7, specular=0.3),
    )
    world.add(left)

    # =========================================================================
    # Grouped cylinder and cone
    # =========================================================================

    column = Group(transform=translation(1.5, 0.0, -0.3) @ rotation_y(0.5) @ rotation_z(-0.2))
    column_handle = world.add(column)

    body = Cylinder(
        minimum=0.0,
        maximum=1.0,
        closed=True,
        transform=scaling(0.3, 1.0, 0.3),
        material=Material(colour=colour(0.1, 0.6, 0.2), diffuse=0.7, specular=1.0, shininess=300.0),
    )
    world.add(body, parent=column_handle)

    tip = Cone(
        minimum=-1.0,
        maximum=0.0,
        closed=True,
        transform=translation(0.0, 1.5, 0.0) @ scaling(0.3, 0.5, 0.3),
        material=Material(colour=colour(0.2, 0.2, 0.2), reflective=1.0, specular=1.0),
    )
    world.add(tip, parent=column_handle)

    # =========================================================================
    # Cube
    # =========================================================================

    cube = Cube(
        transform=translation(0.6, 0.25, -1.2) @ rotation_y(math.pi / 5.0) @ scaling(0.25, 0.25, 0.25),
        material=Material(colour=colour(0.9, 0.2, 0.2), diffuse=0.8, specular=0.4),
    )
    world.add(cube)

    camera = Camera(
        params.width,
        params.height,
        params.field_of_view,
        transform=view_transform(point(0.0, 1.5, -5.0), point(0.0, 1.0, 0.0), vector(0.0, 1.0, 0.0)),
    )
    return world, camera
