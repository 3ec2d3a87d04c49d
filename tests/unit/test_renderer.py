"""Unit tests for distance field rendering.

Tests cover:
- Quantization and sign convention
- The 4x4 two-column bitmap scenario
- Saturation outside the search window
- In-place rendering and scheduling independence
- Argument validation
"""

import numpy as np
import pytest

from bitmapsdf.core.edges import extract_edges
from bitmapsdf.core.intersections import find_intersections
from bitmapsdf.core.renderer import quantize_distance, render_distance_field
from bitmapsdf.domain import EdgeList, PixelBuffer, PixelFormat


def make_gray(values) -> PixelBuffer:
    """Build a G8 buffer from a 2D list of intensities."""
    data = np.asarray(values, dtype=np.uint8)[:, :, np.newaxis]
    return PixelBuffer(data=data, pixel_format=PixelFormat.G8)


def render(source: PixelBuffer, field_distance: float, invert: bool = False, size=None, **kwargs):
    """Trace channel 0 of ``source`` and render it into a fresh buffer."""
    width, height = size or source.size
    output = PixelBuffer.create(width, height, source.pixel_format)
    edges = extract_edges(find_intersections(source, 0))
    render_distance_field(source, 0, field_distance, invert, edges, output, **kwargs)
    return output.channel(0).astype(int)


@pytest.fixture
def two_column_bitmap() -> PixelBuffer:
    """4x4 bitmap, columns 0-1 black and columns 2-3 white."""
    return make_gray([[0, 0, 255, 255]] * 4)


class TestQuantizeDistance:
    """Tests for 8-bit encoding of signed distances."""

    def test_zero_distance_is_midpoint(self):
        """A point on the contour encodes to 127."""
        value = quantize_distance(np.array([0.0]), np.array([False]), 4.0, False)
        assert value[0] == 127

    def test_inside_encodes_high(self):
        """Half the field distance inside saturates to 255."""
        value = quantize_distance(np.array([2.0]), np.array([False]), 4.0, False)
        assert value[0] == 255

    def test_outside_encodes_low(self):
        """Half the field distance outside saturates to 0."""
        value = quantize_distance(np.array([2.0]), np.array([True]), 4.0, False)
        assert value[0] == 0

    def test_invert_swaps_sides(self):
        """Inverting flips which side encodes high."""
        distance = np.array([1.0, 1.0])
        outside = np.array([True, False])

        normal = quantize_distance(distance, outside, 4.0, False)
        inverted = quantize_distance(distance, outside, 4.0, True)

        np.testing.assert_array_equal(normal, inverted[::-1])
        assert normal[0] == 63
        assert inverted[0] == 191

    def test_clamps_out_of_range(self):
        """Distances beyond the band clamp to the 8-bit range."""
        value = quantize_distance(np.array([10.0, 10.0]), np.array([True, False]), 4.0, False)
        np.testing.assert_array_equal(value, [0, 255])


class TestTwoColumnScenario:
    """Tests for a sharp vertical edge between columns 1 and 2."""

    def test_rows_increase_left_to_right(self, two_column_bitmap):
        """Every row is monotonically non-decreasing."""
        field = render(two_column_bitmap, 2.0)
        assert (np.diff(field, axis=1) >= 0).all()

    def test_rows_with_traced_cells_match(self, two_column_bitmap):
        """Rows covered by the traced cells are identical."""
        field = render(two_column_bitmap, 2.0)
        for row in (1, 2):
            np.testing.assert_array_equal(field[row], field[0])

    def test_values_straddle_midpoint(self, two_column_bitmap):
        """Values either side of the edge mirror each other around 127.5."""
        field = render(two_column_bitmap, 2.0)

        assert field[0, 0] == 0
        assert field[0, 3] == 255
        assert abs(field[0, 1] - 64) <= 1
        assert abs(field[0, 2] - 191) <= 1
        assert abs((field[0, 1] + field[0, 2]) / 2 - 127.5) <= 1

    def test_last_row_saturates(self, two_column_bitmap):
        """The final sample row has no traced cell below it and saturates."""
        field = render(two_column_bitmap, 2.0)
        np.testing.assert_array_equal(field[3], [0, 0, 255, 255])

    def test_invert_reverses_direction(self, two_column_bitmap):
        """Inverted fields decrease left to right."""
        field = render(two_column_bitmap, 2.0, invert=True)
        assert (np.diff(field[:3], axis=1) <= 0).all()
        assert field[0, 0] == 255


class TestSearchWindow:
    """Tests for distance saturation and monotonicity."""

    def test_far_points_saturate(self):
        """Points further than half the field distance encode 0 or 255."""
        values = np.zeros((9, 40), dtype=np.uint8)
        values[:, 20:] = 255
        field = render(make_gray(values), 6.0)

        assert (field[:8, :16] == 0).all()
        assert (field[:8, 24:] == 255).all()

    def test_monotonic_with_distance(self):
        """Encoded values grow with distance on the inside."""
        values = np.zeros((9, 40), dtype=np.uint8)
        values[:, 20:] = 255
        field = render(make_gray(values), 16.0)

        inside = field[4, 20:29]
        outside = field[4, 12:20]
        assert (np.diff(inside) >= 0).all()
        assert (np.diff(outside) >= 0).all()
        assert outside[-1] < 128 <= inside[0]

    def test_no_edges_saturates_everything(self):
        """Without segments every pixel sits at the window boundary."""
        source = make_gray(np.full((4, 4), 200))
        output = PixelBuffer.create(4, 4, PixelFormat.G8)

        render_distance_field(source, 0, 4.0, False, EdgeList.empty(), output)

        assert (output.channel(0) == 255).all()


class TestRenderDistanceField:
    """Tests for buffer handling."""

    def test_in_place_matches_separate_output(self):
        """Rendering into the source reads the original intensities."""
        rng = np.random.default_rng(11)
        values = (rng.random((12, 12)) > 0.5).astype(np.uint8) * 255
        source = make_gray(values)
        edges = extract_edges(find_intersections(source, 0))

        separate = PixelBuffer.create(12, 12, PixelFormat.G8)
        render_distance_field(source, 0, 4.0, False, edges, separate)
        render_distance_field(source, 0, 4.0, False, edges, source, rows_per_task=1, max_workers=4)

        np.testing.assert_array_equal(source.data, separate.data)

    def test_other_channels_untouched(self):
        """Only the rendered channel of the output changes."""
        source = PixelBuffer.create(6, 6, PixelFormat.RGBA8)
        source.channel(3)[:, 3:] = 255
        source.channel(0)[:] = 17
        edges = extract_edges(find_intersections(source, 3))

        render_distance_field(source, 3, 4.0, False, edges, source)

        assert (source.channel(0) == 17).all()
        assert not source.channel(1).any()

    def test_parallel_matches_sequential(self):
        """Row bands render the same field regardless of scheduling."""
        rng = np.random.default_rng(5)
        source = make_gray((rng.random((20, 17)) > 0.4).astype(np.uint8) * 255)

        sequential = render(source, 5.0, size=(31, 36), max_workers=1, rows_per_task=100)
        parallel = render(source, 5.0, size=(31, 36), max_workers=4, rows_per_task=2)

        np.testing.assert_array_equal(sequential, parallel)

    def test_rejects_non_positive_distance(self):
        """The field distance must be positive."""
        source = make_gray(np.zeros((3, 3)))
        with pytest.raises(ValueError, match="positive"):
            render_distance_field(source, 0, 0.0, False, EdgeList.empty(), source.copy())

    def test_rejects_stride_mismatch(self):
        """Source and output must share a pixel layout stride."""
        source = make_gray(np.zeros((3, 3)))
        output = PixelBuffer.create(3, 3, PixelFormat.RGBA8)
        with pytest.raises(ValueError, match="stride"):
            render_distance_field(source, 0, 2.0, False, EdgeList.empty(), output)
