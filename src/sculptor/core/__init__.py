"""Core sculpting algorithms for sculptor.

This module contains the core algorithms for:

- Circular index arithmetic over closed contours
- Geometry operations (distances, radial projection, nearest points)
- The sculpting phases (push, densify, consolidate)
- Brush radius policy (cursor distance, area limit, hover fade)

Phases are plain functions over a contour and a sculpt context; the
Sculptor class runs them in order for each brush position.

Key functions:
- push_vertices: Move vertices inside the brush onto its boundary
- densify: Insert vertices into over-long edges around the pushed span
- consolidate: Merge vertices closer than the minimum spacing

Key classes:
- RadiusPolicy: Derives brush radii from cursor position
- Sculptor: Runs a full sculpt step
- SculptStroke: Press-drag-release session with a fixed radius
"""

from sculptor.core.consolidate import consolidate, find_close_pairs
from sculptor.core.densify import densify, find_sparse_sites
from sculptor.core.engine import Sculptor, SculptStroke, StepResult
from sculptor.core.geometry import (
    FALLBACK_DIRECTION,
    distance,
    distance_to_contour,
    midpoint,
    nearest_point_on_contour,
    nearest_point_on_segment,
    project_to_circle,
    radial_direction,
)
from sculptor.core.indexing import next_index, next_index_before_insert, previous_index
from sculptor.core.push import push_vertices
from sculptor.core.radius import RadiusPolicy, area_limited_radius

__all__ = [
    "FALLBACK_DIRECTION",
    # Engine classes
    "RadiusPolicy",
    "SculptStroke",
    "Sculptor",
    "StepResult",
    # Phase functions
    "area_limited_radius",
    "consolidate",
    "densify",
    "find_close_pairs",
    "find_sparse_sites",
    "push_vertices",
    # Geometry functions
    "distance",
    "distance_to_contour",
    "midpoint",
    "nearest_point_on_contour",
    "nearest_point_on_segment",
    "project_to_circle",
    "radial_direction",
    # Index functions
    "next_index",
    "next_index_before_insert",
    "previous_index",
]
