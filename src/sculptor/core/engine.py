"""Sculpting engine.

This module ties the sculpting phases together:

- Sculptor: Runs push, densify and consolidate for one brush position, and
  computes brush radii for sculpting and hover previews
- SculptStroke: One press-drag-release interaction with a fixed brush radius

A step runs synchronously to completion and mutates the contour in place.
"""

import time
from dataclasses import dataclass

import structlog

from sculptor.config import BrushConfig
from sculptor.core.consolidate import consolidate
from sculptor.core.densify import densify
from sculptor.core.push import push_vertices
from sculptor.core.radius import RadiusPolicy, area_limited_radius
from sculptor.domain import (
    BoundingBox,
    Brush,
    Contour,
    CoordinateSpace,
    HoverPreview,
    Point,
    PushedSpan,
    SculptContext,
    Viewport,
)
from sculptor.exceptions import StrokeError
from sculptor.utils import SculptLogger, SculptStats


@dataclass(frozen=True, slots=True)
class StepResult:
    """Outcome of a single sculpt step."""

    span: PushedSpan | None
    inserted: int = 0
    merged: int = 0

    @property
    def pushed(self) -> int:
        return self.span.count if self.span is not None else 0

    @property
    def changed(self) -> bool:
        return self.span is not None


class Sculptor:
    """Deforms contours with a circular brush.

    Example:
        sculptor = Sculptor(BrushConfig(min_spacing=0.5))
        sculptor.sculpt(contour, Point(40, 50), 0.5, 6.0, BoundingBox(512, 512))
    """

    def __init__(
        self,
        config: BrushConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize sculptor with configuration.

        Args:
            config: Brush configuration (defaults if None)
            logger: Structured logger (module logger if None)
        """
        self.config = config or BrushConfig()
        self.logger = logger or structlog.get_logger("sculptor")
        self.radius_policy = RadiusPolicy(self.config)

    def step(self, context: SculptContext) -> StepResult:
        """Run one sculpt step on a prepared context.

        Densify and consolidate only run when push moved at least one vertex.
        """
        span = push_vertices(context.contour, context.brush, context.bounds)
        if span is None:
            return StepResult(span=None)

        inserted = densify(context, span)
        merged = consolidate(context.contour, context.min_spacing, context.bounds)
        return StepResult(span=span, inserted=inserted, merged=merged)

    def sculpt(
        self,
        contour: Contour,
        cursor: Point,
        min_spacing: float,
        brush_radius: float,
        bounds: BoundingBox,
    ) -> Contour:
        """Sculpt a contour with a brush at ``cursor``.

        Args:
            contour: Contour to mutate in place
            cursor: Brush center in model space
            min_spacing: Shortest allowed edge after the step
            brush_radius: Brush radius in model space
            bounds: Model-space area computed points are clamped into

        Returns:
            The same contour object, mutated
        """
        context = SculptContext(
            contour=contour,
            brush=Brush(center=cursor, radius=brush_radius),
            min_spacing=min_spacing,
            bounds=bounds,
        )
        self.step(context)
        return contour

    def preview_radius(
        self,
        contour: Contour,
        cursor: Point,
        bounds: BoundingBox,
        clamp_to_area: bool = True,
        space: CoordinateSpace = CoordinateSpace.MODEL,
        viewport: Viewport | None = None,
    ) -> float:
        """Brush radius the cursor would sculpt with, in ``space`` units."""
        return self.radius_policy.radius(
            contour,
            cursor,
            bounds,
            clamp_to_area=clamp_to_area,
            space=space,
            viewport=viewport,
        )

    def hover_preview(
        self,
        contour: Contour,
        cursor: Point,
        bounds: BoundingBox,
        viewport: Viewport | None = None,
    ) -> HoverPreview | None:
        """Describe the inert hover cursor for ``cursor``.

        Args:
            contour: Contour the cursor would sculpt
            cursor: Cursor position in model space
            bounds: Model-space image area
            viewport: Model-to-display transform (identity if None)

        Returns:
            Hover cursor in display units, or None when hover previews are
            disabled
        """
        if not self.config.show_cursor_on_hover:
            return None

        radius = self.radius_policy.base_radius(
            contour, cursor, CoordinateSpace.DISPLAY, viewport
        )
        alpha = 1.0

        if self.config.limit_radius_outside_region:
            unlimited_radius = radius
            radius = area_limited_radius(
                contour, radius, bounds, CoordinateSpace.DISPLAY, viewport
            )
            alpha = self.radius_policy.hover_alpha(unlimited_radius, radius)

        return HoverPreview(
            center=cursor,
            radius=radius,
            alpha=alpha,
            color=self.config.hover_color,
        )

    def stroke(
        self,
        contour: Contour,
        bounds: BoundingBox,
        viewport: Viewport | None = None,
    ) -> "SculptStroke":
        """Create a stroke session for ``contour``."""
        return SculptStroke(self, contour, bounds, viewport)


class SculptStroke:
    """A single press-drag-release sculpting interaction.

    The brush radius is derived once, from the press position, and kept for
    every drag step of the stroke.

    Example:
        stroke = sculptor.stroke(contour, bounds)
        stroke.begin(Point(40, 50))
        for cursor in path:
            stroke.drag(cursor)
        stats = stroke.end()
    """

    def __init__(
        self,
        sculptor: Sculptor,
        contour: Contour,
        bounds: BoundingBox,
        viewport: Viewport | None = None,
    ) -> None:
        self.sculptor = sculptor
        self.contour = contour
        self.bounds = bounds
        self.viewport = viewport or Viewport()
        self.active = False
        self.cursor: Point | None = None
        self.radius_model = 0.0
        self.radius_display = 0.0
        self._logger = SculptLogger(sculptor.logger)

    def begin(self, cursor: Point, radius: float | None = None) -> None:
        """Start the stroke at ``cursor``.

        Args:
            cursor: Press position in model space. Radii are measured from
                it as given; the stored cursor is clipped to bounds
            radius: Fixed model-space radius, derived from the contour if None

        Raises:
            StrokeError: If the stroke is already active
        """
        if self.active:
            raise StrokeError("stroke already active")

        config = self.sculptor.config
        policy = self.sculptor.radius_policy
        self.cursor = self.bounds.clip(cursor)

        if radius is None:
            self.radius_model = policy.radius(
                self.contour,
                cursor,
                self.bounds,
                clamp_to_area=config.limit_radius_outside_region,
            )
        else:
            self.radius_model = radius

        self.radius_display = policy.radius(
            self.contour,
            cursor,
            self.bounds,
            clamp_to_area=config.limit_radius_outside_region,
            space=CoordinateSpace.DISPLAY,
            viewport=self.viewport,
        )

        self.active = True
        self._logger = SculptLogger(self.sculptor.logger)
        self._logger.stats.start_time = time.time()
        self._logger.log_stroke_start(
            self.cursor.to_tuple(), self.radius_model, self.radius_display
        )

    def drag(self, cursor: Point) -> StepResult:
        """Sculpt with the brush moved to ``cursor``.

        Raises:
            StrokeError: If the stroke has not begun
        """
        if not self.active:
            raise StrokeError("drag on inactive stroke")

        self.cursor = self.bounds.clip(cursor)
        context = SculptContext(
            contour=self.contour,
            brush=Brush(center=self.cursor, radius=self.radius_model),
            min_spacing=self.sculptor.config.min_spacing,
            bounds=self.bounds,
        )
        result = self.sculptor.step(context)

        if result.changed:
            self._logger.log_step(
                self.cursor.to_tuple(),
                pushed=result.pushed,
                inserted=result.inserted,
                merged=result.merged,
                length=len(self.contour),
            )
        else:
            self._logger.log_idle_step(self.cursor.to_tuple())

        return result

    def end(self) -> SculptStats:
        """Finish the stroke and return its statistics.

        Raises:
            StrokeError: If the stroke has not begun
        """
        if not self.active:
            raise StrokeError("end on inactive stroke")

        self.active = False
        stats = self._logger.stats
        stats.end_time = time.time()
        self._logger.log_stroke_complete(len(self.contour), stats.duration_seconds * 1000)
        return stats

    @property
    def stats(self) -> SculptStats:
        return self._logger.stats

    @property
    def color(self) -> str:
        """Color the host should draw the active brush cursor with."""
        return self.sculptor.config.drag_color
