"""Configuration settings for Sculptor."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Smallest minimum spacing; non-positive values are raised to it
MIN_SPACING_FLOOR = 1e-6


class BrushConfig(BaseModel):
    """Configuration for the sculpting brush and its hover cursor.

    Assignments are validated: values of the wrong type, NaN and infinities
    are rejected, while numeric settings are clamped into their legal range
    rather than refused.
    """

    model_config = ConfigDict(strict=True, validate_assignment=True)

    min_spacing: float = Field(
        default=1.0,
        allow_inf_nan=False,
        description="Adjacent vertices closer than this are merged",
    )
    show_cursor_on_hover: bool = Field(
        default=True,
        description="Show a preview of the sculpting radius on hover",
    )
    limit_radius_outside_region: bool = Field(
        default=True,
        description="Limit the brush radius by the area of the sculpted contour",
    )
    hover_cursor_fade_alpha: float = Field(
        default=0.5,
        allow_inf_nan=False,
        description="Alpha the hover cursor fades to when far from the contour (0-1)",
    )
    hover_cursor_fade_distance: float = Field(
        default=1.2,
        allow_inf_nan=False,
        description="Distance from the contour, in radii, beyond which the hover cursor fades",
    )
    drag_color: str = Field(
        default="greenyellow",
        description="Cursor color while sculpting",
    )
    hover_color: str = Field(
        default="white",
        description="Cursor color while hovering",
    )

    @field_validator("min_spacing")
    @classmethod
    def _clamp_min_spacing(cls, value: float) -> float:
        return max(value, MIN_SPACING_FLOOR)

    @field_validator("hover_cursor_fade_alpha")
    @classmethod
    def _clamp_fade_alpha(cls, value: float) -> float:
        return max(min(value, 1.0), 0.0)

    @field_validator("hover_cursor_fade_distance")
    @classmethod
    def _clamp_fade_distance(cls, value: float) -> float:
        # Never fade inside the brush's own radius
        return max(value, 1.0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SculptorSettings(BaseModel):
    """Main application settings."""

    brush: BrushConfig = Field(default_factory=BrushConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SculptorSettings:
    """Get default application settings."""
    return SculptorSettings()
