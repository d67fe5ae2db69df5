"""Pinhole camera for primary ray generation and rendering.

The camera sits at the origin of its own space looking down -z, with the
image plane one unit in front of it. ``field_of_view`` spans the longer
side of the image. The camera transform is a world-to-camera transform,
usually built with ``view_transform``; its inverse carries canvas
positions back into the world.

Example:
    >>> import math
    >>> from whitted.camera.camera import Camera
    >>> from whitted.core.matrix import view_transform
    >>> from whitted.core.tuples import point, vector
    >>> camera = Camera(
    ...     201, 101, math.pi / 2,
    ...     transform=view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0)),
    ... )
    >>> round(camera.pixel_size, 5)
    0.01
"""

import logging
import math
import time
from typing import Optional

from whitted.config import RenderSettings
from whitted.core.matrix import Matrix, identity
from whitted.core.ray import Ray
from whitted.core.tuples import point
from whitted.preview.canvas import Canvas, PixelSink
from whitted.scene.world import World

logger = logging.getLogger(__name__)

_EYE = point(0.0, 0.0, 0.0)


class Camera:
    """A pinhole camera producing one ray per pixel centre.

    Attributes:
        hsize: Horizontal size of the image in pixels.
        vsize: Vertical size of the image in pixels.
        field_of_view: Angle in radians covered by the longer image side.
        transform: World-to-camera transform.
        half_width: Half the width of the image plane in world units.
        half_height: Half the height of the image plane in world units.
        pixel_size: World-space size of one (square) pixel on the image plane.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Optional[Matrix] = None,
    ) -> None:
        """Create a camera and derive the image-plane geometry.

        Raises:
            ValueError: If either size is less than 1 or the field of view is
                not strictly between 0 and pi.
        """
        if hsize < 1 or vsize < 1:
            raise ValueError(f"Camera sizes must be positive, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"field_of_view must be in (0, pi), got {field_of_view}")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform if transform is not None else identity()

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2.0) / hsize

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """The world-space ray through the centre of pixel (px, py).

        Raises:
            NotInvertibleError: If the camera transform is singular.
        """
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        inverse = self.transform.inverse()
        pixel = inverse @ point(world_x, world_y, -1.0)
        origin = inverse @ _EYE
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render(
        self,
        world: World,
        sink: Optional[PixelSink] = None,
        settings: Optional[RenderSettings] = None,
    ) -> PixelSink:
        """Render the world one pixel at a time, row by row.

        Args:
            world: The scene to render.
            sink: Where to write pixels. Defaults to a new ``Canvas`` of the
                camera's size.
            settings: Bounce budget and progress logging interval.

        Returns:
            The sink, with every pixel written.

        Raises:
            NotInvertibleError: If the camera or a shape has a singular
                transform.
        """
        if settings is None:
            settings = RenderSettings()
        if sink is None:
            sink = Canvas(self.hsize, self.vsize)

        logger.info(
            "Rendering %dx%d image of %d shapes (max depth %d)",
            self.hsize,
            self.vsize,
            len(world),
            settings.max_depth,
        )
        start = time.time()

        for y in range(self.vsize):
            for x in range(self.hsize):
                ray = self.ray_for_pixel(x, y)
                sink.write_pixel(x, y, world.colour_at(ray, settings.max_depth))
            if (y + 1) % settings.log_every == 0:
                logger.debug("Rendered row %d/%d", y + 1, self.vsize)

        elapsed = time.time() - start
        logger.info("Rendered %d pixels in %.2fs", self.hsize * self.vsize, elapsed)
        return sink

    def __repr__(self) -> str:
        return f"Camera(hsize={self.hsize}, vsize={self.vsize}, field_of_view={self.field_of_view!r})"
