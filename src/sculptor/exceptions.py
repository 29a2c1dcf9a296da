"""Exception hierarchy for Sculptor."""


class SculptorError(Exception):
    """Base exception for all Sculptor errors."""

    pass


class GeometryError(SculptorError):
    """Errors in geometric calculations."""

    pass


class ContourError(GeometryError):
    """Error with contour data or operations."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ContourTooSmallError(ContourError):
    """Operation would leave a contour with fewer vertices than allowed."""

    def __init__(self, vertex_count: int, minimum: int) -> None:
        self.vertex_count = vertex_count
        self.minimum = minimum
        super().__init__(
            f"Contour needs at least {minimum} vertices, got {vertex_count}"
        )


class StrokeError(SculptorError):
    """Errors related to the sculpt stroke lifecycle."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Sculpt stroke error: {reason}")
