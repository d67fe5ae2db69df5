"""Camera module.

Components:
    camera: Pinhole camera with per-pixel ray generation and the render loop
"""

from .camera import Camera

__all__ = ["Camera"]
