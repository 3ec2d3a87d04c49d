"""Unit tests for coordinate mapping and sampling helpers."""

import numpy as np
import pytest

from bitmapsdf.core.sampling import (
    bilinear_sample,
    closest_point_on_segment,
    squared_distance_to_segment,
    transform_position,
)


class TestTransformPosition:
    """Tests for the centre-preserving coordinate map."""

    def test_identity_for_equal_grids(self):
        """Equal grid sizes leave every point in place."""
        xs = np.array([0.0, 1.0, 2.5, 6.0, -3.0])
        ys = np.array([4.0, 0.0, 1.25, 9.0, 2.0])

        tx, ty = transform_position(7, 10, 7, 10, xs, ys)

        np.testing.assert_allclose(tx, xs)
        np.testing.assert_allclose(ty, ys)

    @pytest.mark.parametrize(
        ("from_size", "to_size"),
        [((4, 4), (8, 8)), ((10, 6), (37, 13)), ((64, 32), (16, 8)), ((3, 9), (3, 2))],
    )
    def test_centres_coincide(self, from_size, to_size):
        """The centre of one grid maps exactly onto the centre of the other."""
        (fw, fh), (tw, th) = from_size, to_size

        tx, ty = transform_position(fw, fh, tw, th, (fw - 1) / 2, (fh - 1) / 2)

        assert float(tx) == (tw - 1) / 2
        assert float(ty) == (th - 1) / 2

    def test_downsample_scales_offsets(self):
        """Offsets from the centre scale by the size ratio."""
        tx, ty = transform_position(8, 8, 4, 4, 0.0, 7.0)

        assert float(tx) == pytest.approx(1.5 - 3.5 * 0.5)
        assert float(ty) == pytest.approx(1.5 + 3.5 * 0.5)

    def test_axes_scale_independently(self):
        """Non-uniform size ratios apply per axis."""
        tx, ty = transform_position(2, 4, 4, 4, 1.0, 3.0)

        assert float(tx) == pytest.approx(1.5 + 0.5 * 2.0)
        assert float(ty) == pytest.approx(3.0)


class TestBilinearSample:
    """Tests for bilinear channel sampling."""

    def test_integer_coordinates_are_exact(self):
        """Sampling on a pixel returns that pixel."""
        rng = np.random.default_rng(3)
        pixels = rng.integers(0, 256, size=(5, 7)).astype(np.uint8)
        ys, xs = np.mgrid[0:5, 0:7]

        sampled = bilinear_sample(pixels, xs.ravel(), ys.ravel())

        np.testing.assert_array_equal(sampled, pixels.ravel())

    def test_horizontal_midpoint_rounds_half_up(self):
        """127.5 rounds to 128."""
        pixels = np.array([[0, 255]], dtype=np.uint8)
        assert int(bilinear_sample(pixels, 0.5, 0.0)) == 128

    def test_four_corner_blend(self):
        """The centre of a cell averages its four corners."""
        pixels = np.array([[0, 100], [200, 100]], dtype=np.uint8)
        assert int(bilinear_sample(pixels, 0.5, 0.5)) == 100

    def test_clamps_below_zero(self):
        """Negative coordinates clamp to the first row and column."""
        pixels = np.array([[10, 20], [30, 40]], dtype=np.uint8)
        assert int(bilinear_sample(pixels, -4.0, -1.0)) == 10

    def test_y_clamps_against_height(self):
        """In a wide bitmap, y clamps to the last row, not the last column."""
        pixels = np.zeros((2, 6), dtype=np.uint8)
        pixels[1, 0] = 77

        assert int(bilinear_sample(pixels, 0.0, 4.0)) == 77

    def test_x_clamps_against_width(self):
        """In a tall bitmap, x clamps to the last column."""
        pixels = np.zeros((6, 2), dtype=np.uint8)
        pixels[0, 1] = 55

        assert int(bilinear_sample(pixels, 5.0, 0.0)) == 55


class TestClosestPointOnSegment:
    """Tests for clamped segment projection."""

    def test_before_start(self):
        """Points behind the start project onto the start."""
        cx, cy = closest_point_on_segment(-2.0, 1.0, 0.0, 0.0, 4.0, 0.0)
        assert (float(cx), float(cy)) == (0.0, 0.0)

    def test_beyond_end(self):
        """Points past the end project onto the end."""
        cx, cy = closest_point_on_segment(9.0, -3.0, 0.0, 0.0, 4.0, 0.0)
        assert (float(cx), float(cy)) == (4.0, 0.0)

    def test_interior_projection(self):
        """Points alongside the segment project perpendicularly."""
        cx, cy = closest_point_on_segment(1.0, 1.0, 0.0, 0.0, 2.0, 2.0)
        assert float(cx) == pytest.approx(1.0)
        assert float(cy) == pytest.approx(1.0)

    def test_degenerate_segment(self):
        """A zero-length segment projects onto its start."""
        cx, cy = closest_point_on_segment(3.0, 4.0, 1.0, 1.0, 1.0, 1.0)
        assert (float(cx), float(cy)) == (1.0, 1.0)

    def test_squared_distance(self):
        """Distance is measured to the segment, not the infinite line."""
        assert float(squared_distance_to_segment(0.0, 1.0, -1.0, 0.0, 1.0, 0.0)) == 1.0
        assert float(squared_distance_to_segment(4.0, 0.0, -1.0, 0.0, 1.0, 0.0)) == 9.0

    def test_broadcasts_points_against_segments(self):
        """A column of points against a row of segments gives a matrix."""
        px = np.array([[0.0], [5.0]])
        ax = np.array([0.0, 10.0])
        dist_sq = squared_distance_to_segment(px, 0.0, ax, 0.0, ax + 1.0, 0.0)

        np.testing.assert_allclose(dist_sq, [[0.0, 100.0], [16.0, 25.0]])
