"""Brush and per-step sculpting types.

Key types:
- Brush: Circular footprint of the sculpting tool (center + radius)
- BoundingBox: Model-space image area every computed point is clamped into
- Viewport: Model-to-display transform for the display coordinate space
- SculptContext: Transient bundle of everything one sculpt step needs
- PushedSpan: Scan span of vertices moved by the push phase
- HoverPreview: What the host should draw for an inert hover cursor
"""

from dataclasses import dataclass, field
from enum import Enum

from sculptor.domain.contour import Contour, Point


class CoordinateSpace(str, Enum):
    """Coordinate space a distance or radius is expressed in."""

    MODEL = "model"
    DISPLAY = "display"


@dataclass(frozen=True, slots=True)
class Brush:
    """Circular brush footprint.

    Attributes:
        center: Brush center (the cursor position)
        radius: Brush radius, same units as center
    """

    center: Point
    radius: float


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Valid image area in model space, anchored at the origin.

    Attributes:
        width: Extent along x
        height: Extent along y
    """

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def clip(self, point: Point) -> Point:
        """Clamp a point into ``[0, width] x [0, height]``.

        Args:
            point: Point to clamp

        Returns:
            Clamped point (the same object if already inside)
        """
        x = min(max(point.x, 0.0), self.width)
        y = min(max(point.y, 0.0), self.height)
        if x == point.x and y == point.y:
            return point
        return Point(x, y)


@dataclass(frozen=True, slots=True)
class Viewport:
    """Axis-aligned affine transform from model space to display space.

    The two scale factors are independent, so the mapping need not preserve
    distances or be isotropic.

    Attributes:
        scale_x: Display units per model unit along x
        scale_y: Display units per model unit along y
        offset_x: Display x of the model origin
        offset_y: Display y of the model origin
    """

    scale_x: float = 1.0
    scale_y: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    def to_display(self, point: Point) -> Point:
        return Point(
            self.offset_x + point.x * self.scale_x,
            self.offset_y + point.y * self.scale_y,
        )

    def display_area(self, bounds: BoundingBox) -> float:
        """Area covered on screen by a model-space bounding box."""
        top_left = self.to_display(Point(0.0, 0.0))
        bottom_right = self.to_display(Point(bounds.width, bounds.height))
        return abs((bottom_right.x - top_left.x) * (bottom_right.y - top_left.y))


@dataclass(frozen=True, slots=True)
class PushedSpan:
    """First and last pushed indices, in scan order, and how many were pushed.

    When the pushed vertices wrap around index 0 this is the scan span, not
    a contiguous arc of the contour.
    """

    first: int
    last: int
    count: int = 1


@dataclass
class SculptContext:
    """Everything a single sculpt step operates on.

    Created fresh for each step and discarded afterwards.

    Attributes:
        contour: Contour being sculpted (mutated in place)
        brush: Brush footprint in model space
        min_spacing: Adjacent vertices closer than this are merged
        bounds: Model-space area computed points are clamped into
        max_spacing: Adjacent vertices further apart get a vertex between them
    """

    contour: Contour
    brush: Brush
    min_spacing: float
    bounds: BoundingBox
    max_spacing: float = field(init=False)

    def __post_init__(self) -> None:
        self.max_spacing = max(self.brush.radius, 2.0 * self.min_spacing)


@dataclass(frozen=True, slots=True)
class HoverPreview:
    """Inert hover cursor the host should render.

    Attributes:
        center: Cursor position in model space
        radius: Cursor radius in display units
        alpha: Opacity to draw with (faded when far from the contour)
        color: Stroke color
    """

    center: Point
    radius: float
    alpha: float
    color: str

    @property
    def faded(self) -> bool:
        return self.alpha < 1.0
