"""Unit tests for the Taichi-backed canvas.

Tests cover:
- Allocation and the initial black image
- Writing and reading pixels, including out-of-range coordinates
- Filling and array conversion
- 8-bit quantisation
"""

import numpy as np
import pytest


class TestCanvas:
    """Tests for Canvas storage."""

    def test_new_canvas_is_black(self):
        """Test dimensions and the initial colour of every pixel."""
        from whitted.core.tuples import BLACK
        from whitted.preview import Canvas

        canvas = Canvas(10, 20)
        assert canvas.width == 10
        assert canvas.height == 20
        assert canvas.pixel_at(0, 0) == BLACK
        assert canvas.pixel_at(9, 19) == BLACK
        assert not canvas.to_numpy().any()

    @pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3)])
    def test_invalid_size_raises(self, width, height):
        """Test that empty canvases are rejected."""
        from whitted.preview import Canvas

        with pytest.raises(ValueError):
            Canvas(width, height)

    def test_write_then_read(self):
        """Test that a written colour reads back."""
        from whitted.core.tuples import colour
        from whitted.preview import Canvas

        canvas = Canvas(10, 20)
        canvas.write_pixel(2, 3, colour(1, 0, 0))
        assert canvas.pixel_at(2, 3) == colour(1, 0, 0)

    def test_values_kept_exactly(self):
        """Test that fractional and out-of-range channels survive storage unchanged."""
        from whitted.core.tuples import colour
        from whitted.preview import Canvas

        canvas = Canvas(4, 4)
        canvas.write_pixel(1, 1, colour(0.3, 1.5, -0.25))
        stored = canvas.pixel_at(1, 1)
        assert (stored.red, stored.green, stored.blue) == (0.3, 1.5, -0.25)

    def test_write_out_of_bounds_is_ignored(self):
        """Test that writes outside the canvas change nothing."""
        from whitted.core.tuples import WHITE
        from whitted.preview import Canvas

        canvas = Canvas(3, 2)
        canvas.write_pixel(3, 0, WHITE)
        canvas.write_pixel(0, 2, WHITE)
        canvas.write_pixel(-1, -1, WHITE)
        assert not canvas.to_numpy().any()

    def test_read_out_of_bounds_raises(self):
        """Test that reading outside the canvas is an error."""
        from whitted.preview import Canvas

        canvas = Canvas(3, 2)
        with pytest.raises(IndexError):
            canvas.pixel_at(3, 0)
        with pytest.raises(IndexError):
            canvas.pixel_at(0, -1)

    def test_fill(self):
        """Test setting every pixel at once."""
        from whitted.core.tuples import colour
        from whitted.preview import Canvas

        canvas = Canvas(5, 4)
        canvas.fill(colour(0.25, 0.5, 0.75))
        assert np.allclose(canvas.to_numpy(), [0.25, 0.5, 0.75])

    def test_to_numpy_is_row_major(self):
        """Test the (height, width, 3) layout of the exported array."""
        from whitted.core.tuples import colour
        from whitted.preview import Canvas

        canvas = Canvas(5, 3)
        canvas.write_pixel(4, 1, colour(0, 1, 0))
        pixels = canvas.to_numpy()

        assert pixels.shape == (3, 5, 3)
        assert pixels[1, 4].tolist() == [0.0, 1.0, 0.0]

    def test_repr(self):
        """Test the canvas representation."""
        from whitted.preview import Canvas

        assert repr(Canvas(7, 2)) == "Canvas(width=7, height=2)"


class TestQuantisation:
    """Tests for converting to 8-bit colour."""

    def test_clamp_and_scale(self):
        """Test clamping to [0, 1] and rounding to the nearest level."""
        from whitted.core.tuples import colour
        from whitted.preview import Canvas

        canvas = Canvas(3, 1)
        canvas.write_pixel(0, 0, colour(1.5, 0, 0))
        canvas.write_pixel(1, 0, colour(0, 0.5, 0))
        canvas.write_pixel(2, 0, colour(-0.5, 0, 1))
        rgb = canvas.to_rgb8()

        assert rgb.dtype == np.uint8
        assert rgb.shape == (1, 3, 3)
        assert rgb[0].tolist() == [[255, 0, 0], [0, 128, 0], [0, 0, 255]]

    def test_matches_colour_helper(self):
        """Test that the kernel agrees with per-colour quantisation."""
        from whitted.core.tuples import colour
        from whitted.preview import Canvas

        c = colour(0.1, 0.8, 0.6)
        canvas = Canvas(1, 1)
        canvas.write_pixel(0, 0, c)
        assert tuple(canvas.to_rgb8()[0, 0].tolist()) == c.to_rgb8()

    @pytest.mark.parametrize("level", [0, 1, 63, 127, 200, 254])
    def test_matches_colour_helper_at_rounding_boundaries(self, level):
        """Test agreement just either side of a half-step between levels."""
        from whitted.core.tuples import colour
        from whitted.preview import Canvas

        half_step = (level + 0.5) / 255
        below = colour(half_step - 1e-9, half_step - 1e-9, half_step - 1e-9)
        above = colour(half_step + 1e-9, half_step + 1e-9, half_step + 1e-9)

        canvas = Canvas(2, 1)
        canvas.write_pixel(0, 0, below)
        canvas.write_pixel(1, 0, above)
        rgb = canvas.to_rgb8()

        assert tuple(rgb[0, 0].tolist()) == below.to_rgb8() == (level,) * 3
        assert tuple(rgb[0, 1].tolist()) == above.to_rgb8() == (level + 1,) * 3
