"""Core geometric types for contour representation.

This module defines the fundamental geometric types used throughout the sculptor:
- Point: An immutable 2D point
- Vertex: A mutable contour vertex that knows its successor
- Segment: The outgoing line of a vertex, as read by renderers
- Contour: A closed, circularly indexed sequence of vertices

The contour owns vertex adjacency. Its insert, remove and move operations are
the only places where a vertex's successor reference is written, so the
segment view and the index order of the contour always agree.
"""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from sculptor.exceptions import ContourError, ContourTooSmallError

MIN_VERTICES = 3


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Segment:
    """A directed line segment between two positions."""

    start: Point
    end: Point


class Vertex:
    """A vertex on a contour.

    The position is mutable so that sculpting keeps vertex identity stable
    while moving it. ``successor`` is the vertex the outgoing segment leads
    to; it is maintained by :class:`Contour` and read-only from outside.
    """

    __slots__ = ("_x", "_y", "_successor")

    def __init__(self, x: float, y: float) -> None:
        self._x = float(x)
        self._y = float(y)
        self._successor: Vertex | None = None

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def position(self) -> Point:
        """Current position as an immutable point."""
        return Point(self._x, self._y)

    @property
    def successor(self) -> "Vertex | None":
        return self._successor

    @property
    def segment(self) -> Segment | None:
        """Outgoing line segment, or None for an unlinked vertex."""
        if self._successor is None:
            return None
        return Segment(self.position, self._successor.position)

    def __repr__(self) -> str:
        return f"Vertex(x={self._x!r}, y={self._y!r})"


class Contour:
    """A closed contour that sculpting mutates in place.

    Vertices are circularly indexed: the successor of the last vertex is the
    first. A contour never holds fewer than three vertices.

    Area and bounding box are cached and dropped by every mutation.

    Attributes:
        vertices: Read-only view of the vertices in contour order
    """

    def __init__(self, points: Iterable[Point | tuple[float, float]]) -> None:
        vertices = [_make_vertex(p) for p in points]
        if len(vertices) < MIN_VERTICES:
            raise ContourTooSmallError(len(vertices), MIN_VERTICES)

        self._vertices: list[Vertex] = vertices
        self._cached_area: float | None = None
        self._cached_bbox: tuple[float, float, float, float] | None = None

        for i in range(len(vertices)):
            self._link(i)

    @classmethod
    def regular_polygon(
        cls, center: Point, radius: float, sides: int
    ) -> "Contour":
        """Create a counter-clockwise regular polygon.

        Args:
            center: Polygon center
            radius: Distance from center to each vertex
            sides: Number of vertices (at least 3)

        Returns:
            New contour
        """
        points = [
            Point(
                center.x + radius * math.cos(2.0 * math.pi * i / sides),
                center.y + radius * math.sin(2.0 * math.pi * i / sides),
            )
            for i in range(sides)
        ]
        return cls(points)

    # ------------------------------------------------------------------
    # Sequence access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._vertices)

    def __getitem__(self, index: int) -> Vertex:
        return self._vertices[index]

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return tuple(self._vertices)

    @property
    def points(self) -> list[Point]:
        """Vertex positions in contour order."""
        return [v.position for v in self._vertices]

    def segments(self) -> list[Segment]:
        """Outgoing segments of every vertex, in contour order."""
        return [v.segment for v in self._vertices if v.segment is not None]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def move(self, index: int, point: Point) -> Vertex:
        """Move the vertex at ``index`` to ``point``.

        The vertex object is kept; the predecessor's segment is re-pointed
        at it.

        Args:
            index: Index of the vertex to move
            point: New position

        Returns:
            The moved vertex
        """
        vertex = self._vertices[index]
        vertex._x = float(point.x)
        vertex._y = float(point.y)
        self._link(self._previous(index))
        self._invalidate()
        return vertex

    def insert(self, index: int, point: Point) -> Vertex:
        """Insert a new vertex so that it ends up at ``index``.

        ``index == len(self)`` appends after the last vertex. The predecessor
        now leads to the new vertex, and the new vertex leads to the former
        occupant of ``index``.

        Args:
            index: Position of the new vertex, 0..len(self)
            point: Position of the new vertex

        Returns:
            The inserted vertex

        Raises:
            ContourError: If index is out of range
        """
        if not 0 <= index <= len(self._vertices):
            raise ContourError(
                f"Insert index {index} out of range for contour of {len(self._vertices)}"
            )

        vertex = _make_vertex(point)
        self._vertices.insert(index, vertex)
        self._link(self._previous(index))
        self._link(index)
        self._invalidate()
        return vertex

    def remove(self, index: int) -> Vertex:
        """Remove the vertex at ``index``.

        The predecessor is linked to the removed vertex's successor.

        Args:
            index: Index of the vertex to remove

        Returns:
            The removed vertex, unlinked

        Raises:
            ContourTooSmallError: If removal would leave fewer than 3 vertices
            ContourError: If index is out of range
        """
        n = len(self._vertices)
        if n <= MIN_VERTICES:
            raise ContourTooSmallError(n - 1, MIN_VERTICES)
        if not 0 <= index < n:
            raise ContourError(f"Remove index {index} out of range for contour of {n}")

        vertex = self._vertices.pop(index)
        vertex._successor = None
        self._link(self._previous(index))
        self._invalidate()
        return vertex

    # ------------------------------------------------------------------
    # Measurements
    # ------------------------------------------------------------------

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        Positive area means counter-clockwise winding. Result is cached
        until the next mutation.

        Returns:
            Signed area of the contour
        """
        if self._cached_area is not None:
            return self._cached_area

        vertices = self._vertices
        n = len(vertices)
        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += vertices[i].x * vertices[j].y
            area -= vertices[j].x * vertices[i].y

        self._cached_area = area / 2.0
        return self._cached_area

    @property
    def area(self) -> float:
        """Unsigned enclosed area."""
        return abs(self.signed_area())

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the contour.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if self._cached_bbox is not None:
            return self._cached_bbox

        xs = [v.x for v in self._vertices]
        ys = [v.y for v in self._vertices]

        self._cached_bbox = (min(xs), min(ys), max(xs), max(ys))
        return self._cached_bbox

    def __repr__(self) -> str:
        return f"Contour({[p.to_tuple() for p in self.points]!r})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _previous(self, index: int) -> int:
        return len(self._vertices) - 1 if index == 0 else index - 1

    def _link(self, index: int) -> None:
        n = len(self._vertices)
        self._vertices[index]._successor = self._vertices[0 if index == n - 1 else index + 1]

    def _invalidate(self) -> None:
        self._cached_area = None
        self._cached_bbox = None


def _make_vertex(point: Point | tuple[float, float]) -> Vertex:
    if isinstance(point, Point):
        return Vertex(point.x, point.y)
    x, y = point
    return Vertex(x, y)
