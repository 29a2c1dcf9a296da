"""Unit tests for the densify phase.

Tests cover:
- Finding over-long edges around the pushed span
- Inserting vertices with index offsets
- Radial placement of vertices whose midpoint falls inside the brush
"""

import pytest

from sculptor.core.densify import densify, find_sparse_sites
from sculptor.core.geometry import distance, midpoint
from sculptor.core.push import push_vertices
from sculptor.domain import BoundingBox, Brush, Contour, Point, PushedSpan, SculptContext

BOUNDS = BoundingBox(100, 100)


def assert_adjacency_consistent(contour: Contour) -> None:
    n = len(contour)
    for i in range(n):
        assert contour[i].successor is contour[(i + 1) % n]


@pytest.fixture
def hexagon() -> Contour:
    """Regular hexagon with 30-unit edges."""
    return Contour.regular_polygon(Point(50, 50), 30.0, 6)


class TestFindSparseSites:
    """Tests for find_sparse_sites."""

    def test_span_and_both_neighbours_sorted(self, hexagon: Contour) -> None:
        """Test the span, the vertex after it and the vertex before it are checked."""
        sites = find_sparse_sites(hexagon, PushedSpan(2, 3, 2), max_spacing=6.0)
        assert sites == [1, 2, 3, 4]

    def test_neighbours_skipped_when_span_covers_contour(self) -> None:
        """Test that no vertex is checked twice when everything was pushed."""
        triangle = Contour([(10, 10), (40, 10), (25, 40)])
        sites = find_sparse_sites(triangle, PushedSpan(0, 2, 3), max_spacing=6.0)
        assert sites == [0, 1, 2]

    def test_single_neighbour_when_span_leaves_one_vertex(self) -> None:
        """Test the vertex after the span is also the one before it."""
        square = Contour([(10, 10), (40, 10), (40, 40), (10, 40)])
        sites = find_sparse_sites(square, PushedSpan(1, 3, 3), max_spacing=6.0)
        assert sites == [0, 1, 2, 3]

    def test_wrapping_span_checks_last_vertex(self, hexagon: Contour) -> None:
        """Test a span ending at the last index checks vertex 0 as its neighbour."""
        sites = find_sparse_sites(hexagon, PushedSpan(4, 5, 2), max_spacing=6.0)
        assert sites == [0, 3, 4, 5]

    def test_short_edges_not_recorded(self, hexagon: Contour) -> None:
        """Test no sites when every edge is within max spacing."""
        assert find_sparse_sites(hexagon, PushedSpan(2, 3, 2), max_spacing=31.0) == []


class TestDensify:
    """Tests for densify."""

    def test_insertions_respect_index_offsets(self, hexagon: Contour) -> None:
        """Test each new vertex lands between the right pair of originals."""
        originals = hexagon.points
        context = SculptContext(hexagon, Brush(Point(0, 0), 1.0), 3.0, BOUNDS)

        inserted = densify(context, PushedSpan(2, 3, 2))

        assert inserted == 4
        assert len(hexagon) == 10
        expected = [
            originals[0],
            originals[1],
            midpoint(originals[1], originals[2]),
            originals[2],
            midpoint(originals[2], originals[3]),
            originals[3],
            midpoint(originals[3], originals[4]),
            originals[4],
            midpoint(originals[4], originals[5]),
            originals[5],
        ]
        for actual, wanted in zip(hexagon.points, expected):
            assert distance(actual, wanted) < 1e-9
        assert_adjacency_consistent(hexagon)

    def test_insert_after_last_vertex_appends(self) -> None:
        """Test an insertion after the last vertex goes between it and vertex 0."""
        contour = Contour([(10, 10), (14, 10), (14, 14), (10, 40)])
        context = SculptContext(contour, Brush(Point(0, 0), 1.0), 5.0, BOUNDS)

        # Only the closing edge 3 -> 0 is longer than max spacing (10)
        inserted = densify(context, PushedSpan(0, 0, 1))

        assert inserted == 1
        assert len(contour) == 5
        appended = contour[4]
        assert appended.position == Point(10.0, 25.0)
        assert contour[3].successor is appended
        assert appended.successor is contour[0]

    def test_midpoint_inside_brush_projected_to_edge(self) -> None:
        """Test a vertex inserted inside the brush is pushed to its boundary."""
        contour = Contour([(40, 50), (60, 50), (50, 90)])
        brush = Brush(Point(50, 49), 12.0)
        context = SculptContext(contour, brush, 1.0, BOUNDS)

        span = push_vertices(contour, brush, BOUNDS)
        assert span == PushedSpan(0, 1, 2)
        densify(context, span)

        new_vertex = contour[1].position
        assert abs(distance(new_vertex, brush.center) - 12.0) < 1e-9
        assert abs(new_vertex.x - 50.0) < 1e-9
        assert new_vertex.y > brush.center.y

    def test_inserted_position_clamped(self) -> None:
        """Test inserted vertices are clamped into the bounds."""
        contour = Contour([(0, 0), (20, 0), (20, 20), (0, 20)])
        bounds = BoundingBox(20, 20)
        brush = Brush(Point(10, 1), 3.0)
        context = SculptContext(contour, brush, 0.5, bounds)

        densify(context, PushedSpan(0, 0, 1))

        assert contour[1].position == Point(10.0, 0.0)
        for vertex in contour:
            assert 0.0 <= vertex.x <= 20.0
            assert 0.0 <= vertex.y <= 20.0

    def test_no_insertions_when_spacing_fine(self, hexagon: Contour) -> None:
        """Test densify leaves a well-sampled contour alone."""
        context = SculptContext(hexagon, Brush(Point(50, 50), 40.0), 1.0, BOUNDS)
        assert densify(context, PushedSpan(0, 1, 2)) == 0
        assert len(hexagon) == 6
