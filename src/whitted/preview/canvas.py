"""Taichi-backed pixel buffer.

The renderer writes linear RGB colours one pixel at a time through the
``PixelSink`` protocol. ``Canvas`` is the default sink: a Taichi vector
field indexed ``[x, y]`` with (0, 0) at the top-left, so rows come out in
image order without flipping.

Quantisation to 8-bit runs as a Taichi kernel over the whole buffer:
each channel is clamped to [0, 1], scaled by 255 and rounded to nearest.
Pixels are stored as 64-bit floats so the result agrees with
``Vec3.to_rgb8``.

Note: Taichi must be initialised (``ti.init``) before a canvas is created.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from whitted.core.tuples import colour
    >>> from whitted.preview.canvas import Canvas
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_pixel(2, 3, colour(1, 0, 0))
    >>> canvas.to_rgb8()[3, 2]
    array([255,   0,   0], dtype=uint8)
"""

from typing import Protocol

import numpy as np
import numpy.typing as npt
import taichi as ti

from whitted.config import PPM_MAX_COLOUR
from whitted.core.tuples import Vec3, colour


class PixelSink(Protocol):
    """Anything the camera can write pixels into."""

    def write_pixel(self, x: int, y: int, colour: Vec3) -> None: ...


# =============================================================================
# Taichi Kernels
# =============================================================================


@ti.kernel
def _fill_kernel(pixels: ti.template(), r: ti.f64, g: ti.f64, b: ti.f64):
    for x, y in pixels:
        pixels[x, y] = ti.Vector([r, g, b])


@ti.kernel
def _quantize_kernel(pixels: ti.template(), out: ti.types.ndarray(), max_value: ti.f64):
    for x, y in pixels:
        for c in ti.static(range(3)):
            v = ti.min(ti.max(pixels[x, y][c], 0.0), 1.0)
            out[y, x, c] = ti.cast(ti.floor(v * max_value + 0.5), ti.u8)


# =============================================================================
# Canvas
# =============================================================================


class Canvas:
    """A width x height grid of linear RGB colours, initially black.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate the pixel field.

        Raises:
            ValueError: If either dimension is less than 1.
        """
        if width < 1 or height < 1:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = ti.Vector.field(3, dtype=ti.f64, shape=(width, height))

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def write_pixel(self, x: int, y: int, colour: Vec3) -> None:
        """Store a colour. Coordinates outside the canvas are ignored."""
        if not self.in_bounds(x, y):
            return
        self._pixels[x, y] = ti.Vector([colour.red, colour.green, colour.blue])

    def pixel_at(self, x: int, y: int) -> Vec3:
        """Read back a stored colour.

        Raises:
            IndexError: If the coordinates are outside the canvas.
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self._width}x{self._height} canvas")
        value = self._pixels[x, y]
        return colour(float(value[0]), float(value[1]), float(value[2]))

    def fill(self, fill_colour: Vec3) -> None:
        """Set every pixel to one colour."""
        _fill_kernel(self._pixels, fill_colour.red, fill_colour.green, fill_colour.blue)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """The linear colours as an array of shape (height, width, 3)."""
        # Field layout is (width, height, 3); images are row-major
        return np.ascontiguousarray(np.transpose(self._pixels.to_numpy(), (1, 0, 2)))

    def to_rgb8(self) -> npt.NDArray[np.uint8]:
        """Clamped, 8-bit colours as an array of shape (height, width, 3)."""
        out = np.zeros((self._height, self._width, 3), dtype=np.uint8)
        _quantize_kernel(self._pixels, out, float(PPM_MAX_COLOUR))
        return out

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
