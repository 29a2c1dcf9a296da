"""Domain models for sculptor.

This module contains the contour being sculpted and the small value objects
that describe a single sculpting step. Models are:

- Mutable only where sculpting needs it (vertex positions, contour membership)
- Immutable value objects everywhere else (frozen dataclasses)
- Independent of any host rendering system

Key classes:
- Point: An immutable 2D point
- Vertex: A contour vertex with its outgoing segment
- Contour: A closed, circularly indexed vertex sequence
- Brush: The circular sculpting footprint
- SculptContext: Per-step bundle of contour, brush and spacing limits
"""

from sculptor.domain.brush import (
    BoundingBox,
    Brush,
    CoordinateSpace,
    HoverPreview,
    PushedSpan,
    SculptContext,
    Viewport,
)
from sculptor.domain.contour import MIN_VERTICES, Contour, Point, Segment, Vertex

__all__: list[str] = [
    # Enums
    "CoordinateSpace",
    # Core types
    "Point",
    "Segment",
    "Vertex",
    "Contour",
    "MIN_VERTICES",
    # Sculpting types
    "BoundingBox",
    "Brush",
    "HoverPreview",
    "PushedSpan",
    "SculptContext",
    "Viewport",
]
