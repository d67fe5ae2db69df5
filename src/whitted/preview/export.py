"""Image export for rendered canvases.

Supported formats:
    - PPM (plain-text P3, 8 bits per channel)
    - PNG (8-bit RGB via Pillow)

Both quantise the linear colours the same way, through
``Canvas.to_rgb8``: clamp to [0, 1], scale by 255, round to nearest.
No gamma correction is applied.

Example:
    >>> from whitted.preview.canvas import Canvas
    >>> from whitted.preview.export import canvas_to_ppm
    >>> print(canvas_to_ppm(Canvas(5, 3)).splitlines()[:3])
    ['P3', '5 3', '255']
"""

import logging
from pathlib import Path
from typing import Union

from PIL import Image as PILImage

from whitted.config import PPM_LINE_WIDTH, PPM_MAX_COLOUR
from whitted.preview.canvas import Canvas

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _wrap(tokens: list[str], line_width: int) -> list[str]:
    """Join tokens with single spaces, starting a new line before overflowing."""
    lines = []
    current = ""
    for token in tokens:
        if not current:
            current = token
        elif len(current) + 1 + len(token) <= line_width:
            current = f"{current} {token}"
        else:
            lines.append(current)
            current = token
    if current:
        lines.append(current)
    return lines


def canvas_to_ppm(canvas: Canvas, line_width: int = PPM_LINE_WIDTH) -> str:
    """Encode a canvas as plain-text PPM.

    The header is ``P3``, the dimensions and the maximum channel value, one
    per line. Each image row then starts on a new line; its channel values
    are separated by single spaces and wrapped so no line is longer than
    ``line_width``. The text ends with a newline.

    Args:
        canvas: The canvas to encode.
        line_width: Maximum characters per pixel-data line.

    Returns:
        The PPM document.
    """
    rgb = canvas.to_rgb8()
    lines = ["P3", f"{canvas.width} {canvas.height}", str(PPM_MAX_COLOUR)]
    for row in rgb:
        tokens = [str(int(value)) for value in row.reshape(-1)]
        lines.extend(_wrap(tokens, line_width))
    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: PathLike, line_width: int = PPM_LINE_WIDTH) -> None:
    """Write a canvas to a plain-text PPM file."""
    Path(filepath).write_text(canvas_to_ppm(canvas, line_width), encoding="ascii")
    logger.info("Saved %dx%d PPM to %s", canvas.width, canvas.height, filepath)


def save_png(canvas: Canvas, filepath: PathLike) -> None:
    """Write a canvas to an 8-bit RGB PNG file via Pillow."""
    pil_image = PILImage.fromarray(canvas.to_rgb8())
    pil_image.save(filepath)
    logger.info("Saved %dx%d PNG to %s", canvas.width, canvas.height, filepath)
