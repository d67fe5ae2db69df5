"""Preview module.

Pixel storage and image file output.

Components:
    canvas: PixelSink protocol and the Taichi-backed Canvas
    export: PPM and PNG encoding
"""

from .canvas import Canvas, PixelSink
from .export import canvas_to_ppm, save_png, save_ppm

__all__ = [
    "Canvas",
    "PixelSink",
    "canvas_to_ppm",
    "save_ppm",
    "save_png",
]
