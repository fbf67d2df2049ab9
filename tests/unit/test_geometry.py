"""Tests for geometric operations used by the grid sampler."""

import pytest

from splatcover.core import geometry
from splatcover.core.geometry import (
    count_covered_rows,
    point_covered,
    point_in_circle,
    split_rows,
    union_bounding_box,
)
from splatcover.domain import BoundingBox, Circle


class TestPointInCircle:
    """Tests for point_in_circle function."""

    def test_centre(self):
        """Test that the centre is inside."""
        assert point_in_circle(2.0, 3.0, (2.0, 3.0, 0.1))

    def test_boundary_is_covered(self):
        """Test that a point exactly on the edge counts as inside."""
        c = (0.0, 0.0, 2.0)
        assert point_in_circle(2.0, 0.0, c)
        assert point_in_circle(0.0, -2.0, c)

    def test_inside(self):
        """Test a point strictly inside."""
        assert point_in_circle(0.5, 0.5, (0.0, 0.0, 1.0))

    def test_outside(self):
        """Test a point just past the edge."""
        assert not point_in_circle(2.001, 0.0, (0.0, 0.0, 2.0))

    def test_bounding_box_corner_outside(self):
        """Test that the corner of the bounding box is not covered."""
        assert not point_in_circle(-1.0, -1.0, (0.0, 0.0, 1.0))

    def test_accepts_circle_tuple(self):
        """Test that Circle.to_tuple output is accepted."""
        assert point_in_circle(1.0, 0.0, Circle(0.0, 0.0, 1.0).to_tuple())


class TestPointCovered:
    """Tests for point_covered function."""

    def test_no_circles(self):
        """Test that nothing is covered by an empty set."""
        assert not point_covered(0.0, 0.0, [])

    def test_covered_by_second_circle(self):
        """Test that any circle may cover the point."""
        circles = [(10.0, 10.0, 1.0), (0.0, 0.0, 1.0)]
        assert point_covered(0.5, 0.0, circles)

    def test_short_circuits(self):
        """Test that iteration stops at the first covering circle."""
        seen = []

        def circles():
            for c in [(0.0, 0.0, 1.0), (0.0, 0.0, 2.0)]:
                seen.append(c)
                yield c

        assert point_covered(0.0, 0.0, circles())
        assert len(seen) == 1


class TestUnionBoundingBox:
    """Tests for union_bounding_box function."""

    def test_empty(self):
        """Test that an empty set has no bounding box."""
        assert union_bounding_box([]) is None

    def test_single_circle(self):
        """Test bounding box of one circle."""
        assert union_bounding_box([Circle(0.0, 0.0, 1.0)]) == BoundingBox(-1.0, -1.0, 1.0, 1.0)

    def test_mixed_radii(self):
        """Test that each circle contributes its own extent."""
        circles = [Circle(0.0, 0.0, 1.0), Circle(10.0, 10.0, 1.0), Circle(5.0, -3.0, 4.0)]
        assert union_bounding_box(circles) == BoundingBox(-1.0, -7.0, 11.0, 11.0)


class TestSplitRows:
    """Tests for split_rows function."""

    def test_even_split(self):
        """Test rows divide evenly."""
        assert split_rows(8, 4) == [(0, 2), (2, 4), (4, 6), (6, 8)]

    def test_uneven_split(self):
        """Test leftover rows go to the first bands."""
        assert split_rows(10, 3) == [(0, 4), (4, 7), (7, 10)]

    def test_more_bands_than_rows(self):
        """Test that no empty bands are produced."""
        assert split_rows(2, 8) == [(0, 1), (1, 2)]

    @pytest.mark.parametrize("resolution,bands", [(1, 1), (7, 2), (256, 6), (100, 100)])
    def test_covers_every_row_once(self, resolution, bands):
        """Test that bands are contiguous and cover [0, resolution)."""
        result = split_rows(resolution, bands)
        assert result[0][0] == 0
        assert result[-1][1] == resolution
        for (_, stop), (start, _) in zip(result, result[1:]):
            assert stop == start


class TestCountCoveredRows:
    """Tests for count_covered_rows function."""

    def test_lower_left_sampling(self):
        """Test samples sit on the lower-left corner of each cell.

        For the unit circle at resolution 2 the samples are (-1,-1), (0,-1),
        (-1,0) and (0,0). Only the bounding box corner misses.
        """
        count = count_covered_rows([(0.0, 0.0, 1.0)], (-1.0, -1.0, 1.0, 1.0), 2, 0, 2)
        assert count == 3

    def test_single_sample(self):
        """Test resolution 1 samples only the bounding box corner."""
        count = count_covered_rows([(0.0, 0.0, 1.0)], (-1.0, -1.0, 1.0, 1.0), 1, 0, 1)
        assert count == 0

    def test_bands_sum_to_full_grid(self):
        """Test that counting row bands separately adds up to the full count."""
        circles = [(0.0, 0.0, 1.0), (1.5, 0.5, 0.75)]
        bbox = (-1.0, -1.0, 2.25, 1.25)
        full = count_covered_rows(circles, bbox, 50, 0, 50)
        banded = sum(
            count_covered_rows(circles, bbox, 50, start, stop)
            for start, stop in split_rows(50, 7)
        )
        assert banded == full

    def test_duplicates_counted_once(self):
        """Test that a sample inside several circles counts once."""
        bbox = (-1.0, -1.0, 1.0, 1.0)
        once = count_covered_rows([(0.0, 0.0, 1.0)], bbox, 32, 0, 32)
        twice = count_covered_rows([(0.0, 0.0, 1.0), (0.0, 0.0, 1.0)], bbox, 32, 0, 32)
        assert once == twice

    def test_samples_use_point_covered(self, monkeypatch):
        """Test that every grid sample goes through point_covered."""
        calls = []
        original = geometry.point_covered

        def recording(x, y, circles):
            calls.append((x, y))
            return original(x, y, circles)

        monkeypatch.setattr(geometry, "point_covered", recording)

        count = count_covered_rows([(0.0, 0.0, 1.0)], (-1.0, -1.0, 1.0, 1.0), 2, 0, 2)

        assert count == 3
        assert calls == [(-1.0, -1.0), (0.0, -1.0), (-1.0, 0.0), (0.0, 0.0)]
