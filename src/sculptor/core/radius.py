"""Brush radius policy.

The brush radius is the distance from the cursor to the contour being
sculpted, optionally limited so the brush circle never covers more area than
the contour itself. Model and display space are handled independently since
the viewport may scale x and y differently.
"""

import math

from sculptor.config import BrushConfig
from sculptor.core.geometry import distance_to_contour
from sculptor.domain import BoundingBox, Contour, CoordinateSpace, Point, Viewport


def area_limited_radius(
    contour: Contour,
    radius: float,
    bounds: BoundingBox,
    space: CoordinateSpace = CoordinateSpace.MODEL,
    viewport: Viewport | None = None,
) -> float:
    """Limit a radius to that of a circle with the contour's area.

    In display space the contour area is rescaled by the ratio of the
    displayed image area to the model image area.

    Args:
        contour: Contour whose area bounds the radius
        radius: Radius to limit, in units of ``space``
        bounds: Model-space image area
        space: Space ``radius`` is expressed in
        viewport: Model-to-display transform (identity if None)

    Returns:
        ``min(radius, sqrt(area / pi))``
    """
    area_modifier = 1.0

    if space == CoordinateSpace.DISPLAY and bounds.area > 0:
        viewport = viewport or Viewport()
        area_modifier = viewport.display_area(bounds) / bounds.area

    max_radius = math.sqrt(contour.area * area_modifier / math.pi)
    return min(radius, max_radius)


class RadiusPolicy:
    """Derives brush radii from cursor position and configuration.

    Example:
        policy = RadiusPolicy(BrushConfig())
        radius = policy.radius(contour, cursor, bounds)
    """

    def __init__(self, config: BrushConfig) -> None:
        self.config = config

    def base_radius(
        self,
        contour: Contour,
        cursor: Point,
        space: CoordinateSpace = CoordinateSpace.MODEL,
        viewport: Viewport | None = None,
    ) -> float:
        """Unlimited radius: distance from cursor to the contour in ``space``."""
        if space == CoordinateSpace.DISPLAY:
            return distance_to_contour(cursor, contour, viewport or Viewport())
        return distance_to_contour(cursor, contour)

    def radius(
        self,
        contour: Contour,
        cursor: Point,
        bounds: BoundingBox,
        clamp_to_area: bool = True,
        space: CoordinateSpace = CoordinateSpace.MODEL,
        viewport: Viewport | None = None,
    ) -> float:
        """Brush radius for a cursor position.

        Args:
            contour: Contour being sculpted
            cursor: Cursor position in model space
            bounds: Model-space image area
            clamp_to_area: Apply the contour area limit
            space: Space to compute the radius in
            viewport: Model-to-display transform (identity if None)

        Returns:
            Radius in units of ``space``
        """
        radius = self.base_radius(contour, cursor, space, viewport)
        if clamp_to_area:
            radius = area_limited_radius(contour, radius, bounds, space, viewport)
        return radius

    def hover_alpha(self, unlimited_radius: float, limited_radius: float) -> float:
        """Opacity for a hover cursor.

        Fades to ``hover_cursor_fade_alpha`` once the cursor is further from
        the contour than ``hover_cursor_fade_distance`` limited radii.
        """
        if unlimited_radius > self.config.hover_cursor_fade_distance * limited_radius:
            return self.config.hover_cursor_fade_alpha
        return 1.0
