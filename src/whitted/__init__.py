"""Recursive Whitted-style ray tracer.

This package determines, for every ray cast through a virtual camera, the
first surface it strikes and the colour that surface contributes once
Phong illumination, hard shadows, reflection and refraction are combined:

- Tagged points, vectors and colours with kind-checked arithmetic
- 4x4 affine transforms with cofactor-expansion inverses
- Spheres, planes, cubes, cylinders, cones and nested groups
- Nested-dielectric refraction with Schlick reflectance blending
- Taichi-backed pixel canvas with PPM and PNG export

Subpackages:
    core: Tagged vectors, matrices and rays
    geometry: Shape primitives and local-space intersection
    materials: Phong material, procedural patterns and lighting
    scene: Shape arena, intersection engine and world shading
    camera: Pixel-to-ray mapping and the render loop
    preview: Pixel canvas and image export
"""

__version__ = "0.1.0"
