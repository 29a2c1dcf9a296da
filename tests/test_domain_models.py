"""Tests for domain models to verify they work correctly."""

import pytest

from sculptor.domain import (
    BoundingBox,
    Brush,
    Contour,
    HoverPreview,
    Point,
    SculptContext,
    Segment,
    Viewport,
)
from sculptor.exceptions import ContourError, ContourTooSmallError


def assert_adjacency_consistent(contour: Contour) -> None:
    """Every vertex must lead to the vertex at the next index."""
    n = len(contour)
    for i in range(n):
        assert contour[i].successor is contour[(i + 1) % n], f"vertex {i} mislinked"


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestContour:
    """Tests for Contour class."""

    def test_contour_creation(self) -> None:
        """Test basic contour creation."""
        contour = Contour([Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)])
        assert len(contour) == 4
        assert_adjacency_consistent(contour)

    def test_contour_from_tuples(self) -> None:
        """Test contour creation from plain tuples."""
        contour = Contour([(0, 0), (10, 0), (0, 10)])
        assert contour.points == [Point(0.0, 0.0), Point(10.0, 0.0), Point(0.0, 10.0)]

    def test_contour_rejects_too_few_vertices(self) -> None:
        """Test that a contour needs at least three vertices."""
        with pytest.raises(ContourTooSmallError):
            Contour([Point(0, 0), Point(1, 1)])

    def test_last_vertex_links_to_first(self) -> None:
        """Test circular adjacency of the closing segment."""
        contour = Contour([Point(0, 0), Point(10, 0), Point(0, 10)])
        assert contour[2].successor is contour[0]
        assert contour[2].segment == Segment(Point(0.0, 10.0), Point(0.0, 0.0))

    def test_signed_area_counterclockwise(self) -> None:
        """Test signed area for counter-clockwise square."""
        contour = Contour([Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)])
        assert abs(contour.signed_area() - 10000.0) < 0.1
        assert abs(contour.area - 10000.0) < 0.1

    def test_signed_area_clockwise(self) -> None:
        """Test signed area for clockwise square."""
        contour = Contour([Point(0, 0), Point(0, 100), Point(100, 100), Point(100, 0)])
        assert contour.signed_area() < 0
        assert abs(contour.area - 10000.0) < 0.1

    def test_bounding_box(self) -> None:
        """Test bounding box calculation."""
        contour = Contour([Point(10, 20), Point(100, 30), Point(50, 150)])
        assert contour.bounding_box() == (10.0, 20.0, 100.0, 150.0)

    def test_regular_polygon(self) -> None:
        """Test regular polygon construction."""
        contour = Contour.regular_polygon(Point(50, 50), 10.0, 6)
        assert len(contour) == 6
        for vertex in contour:
            assert abs(((vertex.x - 50) ** 2 + (vertex.y - 50) ** 2) ** 0.5 - 10.0) < 1e-9
        assert contour.signed_area() > 0


class TestContourMutation:
    """Tests for the mutators that own vertex adjacency."""

    @pytest.fixture
    def square(self) -> Contour:
        return Contour([Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)])

    def test_move_keeps_vertex_identity(self, square: Contour) -> None:
        """Test that moving a vertex keeps the same object in place."""
        vertex = square[1]
        square.move(1, Point(12, -1))

        assert square[1] is vertex
        assert vertex.position == Point(12.0, -1.0)
        assert square[0].successor is vertex
        assert square[0].segment == Segment(Point(0.0, 0.0), Point(12.0, -1.0))

    def test_move_drops_cached_measurements(self, square: Contour) -> None:
        """Test that area and bounding box are recomputed after a move."""
        assert abs(square.area - 100.0) < 1e-9
        assert square.bounding_box() == (0.0, 0.0, 10.0, 10.0)

        square.move(2, Point(20, 20))

        assert square.bounding_box() == (0.0, 0.0, 20.0, 20.0)
        assert square.area > 100.0

    def test_insert_in_middle(self, square: Contour) -> None:
        """Test inserting between two vertices rewires both segments."""
        before = square[0]
        after = square[1]

        inserted = square.insert(1, Point(5, -2))

        assert len(square) == 5
        assert square[1] is inserted
        assert before.successor is inserted
        assert inserted.successor is after
        assert_adjacency_consistent(square)

    def test_insert_at_end_wraps_to_first(self, square: Contour) -> None:
        """Test appending links the new vertex back to vertex 0."""
        inserted = square.insert(4, Point(-2, 5))

        assert square[4] is inserted
        assert square[3].successor is inserted
        assert inserted.successor is square[0]
        assert_adjacency_consistent(square)

    def test_insert_at_start(self, square: Contour) -> None:
        """Test inserting at index 0 links the last vertex to it."""
        inserted = square.insert(0, Point(-1, -1))

        assert square[0] is inserted
        assert square[4].successor is inserted
        assert_adjacency_consistent(square)

    def test_insert_out_of_range(self, square: Contour) -> None:
        """Test that out-of-range inserts are rejected."""
        with pytest.raises(ContourError):
            square.insert(6, Point(0, 0))

    def test_remove_relinks_predecessor(self, square: Contour) -> None:
        """Test removing a vertex links its predecessor to its successor."""
        square.insert(2, Point(11, 5))
        removed = square.remove(2)

        assert removed.successor is None
        assert len(square) == 4
        assert square[1].successor is square[2]
        assert_adjacency_consistent(square)

    def test_remove_first_and_last(self) -> None:
        """Test removal at both ends of the index range."""
        contour = Contour([(0, 0), (10, 0), (10, 10), (5, 12), (0, 10)])
        contour.remove(0)
        assert_adjacency_consistent(contour)
        contour.remove(len(contour) - 1)
        assert_adjacency_consistent(contour)
        assert contour.points == [Point(10.0, 0.0), Point(10.0, 10.0), Point(5.0, 12.0)]

    def test_remove_never_below_three(self, square: Contour) -> None:
        """Test that a triangle cannot lose a vertex."""
        square.remove(3)
        with pytest.raises(ContourTooSmallError):
            square.remove(0)
        assert len(square) == 3


class TestBrushTypes:
    """Tests for brush, bounds, viewport and context types."""

    def test_bounding_box_clip(self) -> None:
        """Test clamping into the image area."""
        bounds = BoundingBox(100, 50)
        assert bounds.clip(Point(-5, 20)) == Point(0.0, 20.0)
        assert bounds.clip(Point(120, 60)) == Point(100, 50)
        inside = Point(10, 10)
        assert bounds.clip(inside) is inside

    def test_viewport_anisotropic(self) -> None:
        """Test a viewport with different x and y scales."""
        viewport = Viewport(scale_x=2.0, scale_y=0.5, offset_x=10.0)
        assert viewport.to_display(Point(3, 4)) == Point(16.0, 2.0)
        assert viewport.display_area(BoundingBox(100, 100)) == 10000.0

    def test_context_max_spacing_from_radius(self) -> None:
        """Test max spacing follows the radius when it is larger."""
        contour = Contour([(0, 0), (10, 0), (0, 10)])
        context = SculptContext(contour, Brush(Point(0, 0), 5.0), 1.0, BoundingBox(20, 20))
        assert context.max_spacing == 5.0

    def test_context_max_spacing_from_min_spacing(self) -> None:
        """Test max spacing is at least twice the min spacing."""
        contour = Contour([(0, 0), (10, 0), (0, 10)])
        context = SculptContext(contour, Brush(Point(0, 0), 1.5), 1.0, BoundingBox(20, 20))
        assert context.max_spacing == 2.0

    def test_hover_preview_faded(self) -> None:
        """Test hover preview fade flag."""
        assert HoverPreview(Point(0, 0), 3.0, 0.5, "white").faded
        assert not HoverPreview(Point(0, 0), 3.0, 1.0, "white").faded
