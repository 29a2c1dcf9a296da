"""Push phase: move vertices inside the brush onto its boundary."""

import logging

from sculptor.core.geometry import distance, project_to_circle
from sculptor.domain import BoundingBox, Brush, Contour, PushedSpan

logger = logging.getLogger(__name__)


def push_vertices(contour: Contour, brush: Brush, bounds: BoundingBox) -> PushedSpan | None:
    """Push every vertex within the brush radius out to the brush edge.

    Vertices at distance <= radius are relocated to
    ``center + radius * direction`` and clamped into ``bounds``. A vertex
    sitting exactly on the brush center is pushed along the fallback
    direction.

    Args:
        contour: Contour to mutate in place
        brush: Brush footprint
        bounds: Area every pushed position is clamped into

    Returns:
        Span of the first and last pushed indices in scan order, or None if
        no vertex was inside the brush
    """
    first: int | None = None
    last: int | None = None
    count = 0

    for i, vertex in enumerate(contour):
        if distance(vertex.position, brush.center) > brush.radius:
            continue

        contour.move(i, bounds.clip(project_to_circle(brush, vertex.position)))

        if first is None:
            first = i
        last = i
        count += 1

    if first is None or last is None:
        return None

    logger.debug("Pushed vertices first=%d last=%d length=%d", first, last, len(contour))
    return PushedSpan(first=first, last=last, count=count)
