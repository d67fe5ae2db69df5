"""Scene module.

Scene storage, intersection queries and recursive shading.

Components:
    arena: ShapeArena, handle-based shape storage with group membership
    light: PointLight source
    intersection: Intersection records, hit selection, hit preparation, Schlick
    world: World container and Whitted shading (shadows, reflection, refraction)
    presets: The reference two-sphere world and a showcase scene
"""

from .arena import ShapeArena
from .intersection import Computations, Intersection, Intersections, intersect, prepare_computations, schlick
from .light import PointLight
from .presets import ShowcaseParams, create_showcase_scene, default_world
from .world import World, default_light

__all__ = [
    "ShapeArena",
    "PointLight",
    "Intersection",
    "Intersections",
    "Computations",
    "intersect",
    "prepare_computations",
    "schlick",
    "World",
    "default_light",
    "default_world",
    "ShowcaseParams",
    "create_showcase_scene",
]
