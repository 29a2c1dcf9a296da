"""Geometric operations for brush and contour calculations.

This module provides core mathematical utilities for:
- Point distances and midpoints
- Radial projection of a point onto a circle
- Nearest point calculations against segments and contours

All functions are pure and stateless.
"""

import math

from sculptor.domain import Brush, Contour, Point, Viewport

# Direction used when a point coincides with the brush center and the
# center-to-point direction is undefined.
FALLBACK_DIRECTION: tuple[float, float] = (1.0, 0.0)


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def midpoint(p1: Point, p2: Point) -> Point:
    """Point half way between two points."""
    return Point((p1.x + p2.x) / 2.0, (p1.y + p2.y) / 2.0)


def radial_direction(center: Point, point: Point) -> tuple[float, float]:
    """Unit vector pointing from ``center`` towards ``point``.

    Args:
        center: Origin of the direction
        point: Point the direction points at

    Returns:
        Tuple (dx, dy) of unit length. ``FALLBACK_DIRECTION`` when the two
        points coincide.
    """
    length = distance(center, point)
    if length == 0.0:
        return FALLBACK_DIRECTION
    return (point.x - center.x) / length, (point.y - center.y) / length


def project_to_circle(brush: Brush, point: Point) -> Point:
    """Move a point radially onto the brush boundary.

    Examples:
        >>> project_to_circle(Brush(Point(0.0, 0.0), 2.0), Point(0.0, 1.0))
        Point(x=0.0, y=2.0)
        >>> project_to_circle(Brush(Point(0.0, 0.0), 2.0), Point(0.0, 0.0))
        Point(x=2.0, y=0.0)
    """
    dx, dy = radial_direction(brush.center, point)
    return Point(brush.center.x + brush.radius * dx, brush.center.y + brush.radius * dy)


def nearest_point_on_segment(point: Point, seg_start: Point, seg_end: Point) -> tuple[Point, float]:
    """Find the closest point on a line segment to a given point.

    Projects the point onto the infinite line, then clamps to the segment endpoints.

    Args:
        point: The point to project
        seg_start: Start point of line segment
        seg_end: End point of line segment

    Returns:
        Tuple of (nearest_point, distance) where nearest_point is the closest
        point on the segment and distance is the Euclidean distance to it

    Examples:
        >>> nearest, dist = nearest_point_on_segment(
        ...     Point(1.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0)
        ... )
        >>> nearest, dist
        (Point(x=1.0, y=0.0), 1.0)
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y

    # Handle zero-length segment
    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq < 1e-10:
        return seg_start, distance(point, seg_start)

    # t = dot(point - start, end - start) / ||end - start||^2
    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    nearest = Point(seg_start.x + t * dx, seg_start.y + t * dy)
    return nearest, distance(point, nearest)


def nearest_point_on_contour(
    point: Point,
    contour: Contour,
    viewport: Viewport | None = None,
) -> tuple[Point, float]:
    """Find the closest point on a contour's segments to a given point.

    With a viewport, both the point and the contour are first mapped into
    display space, and the returned point and distance are in display units.

    Args:
        point: Model-space point to measure from
        contour: The contour to search
        viewport: Optional model-to-display transform

    Returns:
        Tuple of (nearest_point, distance)
    """
    if viewport is not None:
        point = viewport.to_display(point)
        positions = [viewport.to_display(p) for p in contour.points]
    else:
        positions = contour.points

    n = len(positions)
    nearest_point = positions[0]
    min_distance = distance(point, positions[0])

    for i in range(n):
        candidate, dist = nearest_point_on_segment(point, positions[i], positions[(i + 1) % n])
        if dist < min_distance:
            min_distance = dist
            nearest_point = candidate

    return nearest_point, min_distance


def distance_to_contour(
    point: Point,
    contour: Contour,
    viewport: Viewport | None = None,
) -> float:
    """Distance from a point to the nearest point on a contour."""
    return nearest_point_on_contour(point, contour, viewport)[1]
