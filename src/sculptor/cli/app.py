"""CLI application entry point for sculptor.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from sculptor import __version__
from sculptor.cli.output import (
    console,
    create_progress,
    print_contour_info,
    print_error,
    print_header,
    print_hover_preview,
    print_radius_info,
    print_step,
    print_stroke_summary,
)
from sculptor.config import BrushConfig, LoggingConfig, SculptorSettings
from sculptor.core import Sculptor
from sculptor.domain import BoundingBox, Contour, CoordinateSpace, Point, Viewport
from sculptor.exceptions import SculptorError
from sculptor.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="sculptor",
    help="Sculpt closed polygon contours with a circular brush.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Sculptor[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Sculpt closed polygon contours with a circular brush."""


def parse_point(value: str, name: str) -> Point:
    """Parse an ``x,y`` option value.

    Raises:
        typer.BadParameter: If the value is not two comma-separated numbers
    """
    try:
        x, y = (float(part) for part in value.split(","))
    except ValueError:
        raise typer.BadParameter(f"expected x,y but got '{value}'", param_hint=name) from None
    return Point(x, y)


def _build_contour(center: str, size: float, vertices: int) -> Contour:
    return Contour.regular_polygon(parse_point(center, "--center"), size, vertices)


@app.command()
def stroke(
    start: Annotated[
        str,
        typer.Option("--start", "-s", help="Press position as x,y"),
    ] = "20,50",
    end: Annotated[
        str,
        typer.Option("--end", "-e", help="Release position as x,y"),
    ] = "45,50",
    steps: Annotated[
        int,
        typer.Option("--steps", "-n", help="Number of drag steps between press and release", min=1),
    ] = 10,
    vertices: Annotated[
        int,
        typer.Option("--vertices", help="Vertex count of the generated contour", min=3),
    ] = 32,
    size: Annotated[
        float,
        typer.Option("--size", help="Circumradius of the generated contour"),
    ] = 30.0,
    center: Annotated[
        str,
        typer.Option("--center", help="Center of the generated contour as x,y"),
    ] = "50,50",
    width: Annotated[
        float,
        typer.Option("--width", help="Image width in model units"),
    ] = 100.0,
    height: Annotated[
        float,
        typer.Option("--height", help="Image height in model units"),
    ] = 100.0,
    radius: Annotated[
        float | None,
        typer.Option("--radius", "-r", help="Fixed brush radius (default: distance to contour)"),
    ] = None,
    min_spacing: Annotated[
        float,
        typer.Option("--min-spacing", help="Merge vertices closer than this"),
    ] = 1.0,
    no_limit: Annotated[
        bool,
        typer.Option("--no-limit", help="Do not limit the brush radius by contour area"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Replay a straight drag across a generated contour.

    The contour is a regular polygon; the brush radius is taken from the
    press position unless --radius is given.

    Example:
        sculptor stroke --start 20,50 --end 45,50 --steps 10
    """
    start_point = parse_point(start, "--start")
    end_point = parse_point(end, "--end")

    try:
        settings = SculptorSettings(
            brush=BrushConfig(
                min_spacing=min_spacing,
                limit_radius_outside_region=not no_limit,
            ),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        print_error("Invalid brush settings", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        contour = _build_contour(center, size, vertices)
        bounds = BoundingBox(width, height)
        sculptor = Sculptor(settings.brush, logger=logger)

        if not quiet:
            print_step("Contour")
            print_contour_info(contour, "before")

        session = sculptor.stroke(contour, bounds)
        session.begin(start_point, radius=radius)

        if not quiet:
            print_radius_info(session.radius_model, session.radius_display, session.color)
            print_step("Sculpting")

        path = [
            Point(
                start_point.x + (end_point.x - start_point.x) * i / steps,
                start_point.y + (end_point.y - start_point.y) * i / steps,
            )
            for i in range(1, steps + 1)
        ]

        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task("Dragging", total=len(path))
                for cursor in path:
                    session.drag(cursor)
                    progress.advance(task_id)
        else:
            for cursor in path:
                session.drag(cursor)

        stats = session.end()

        if not quiet:
            print_stroke_summary(
                steps=stats.steps,
                idle_steps=stats.idle_steps,
                pushed=stats.pushed_count,
                inserted=stats.inserted_count,
                merged=stats.merged_count,
                total_time_s=stats.duration_seconds,
            )
            print_contour_info(contour, "after")
        else:
            console.print(f"{len(contour)} vertices")

    except SculptorError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def preview(
    cursor: Annotated[
        str,
        typer.Argument(help="Cursor position as x,y", show_default=False),
    ],
    vertices: Annotated[
        int,
        typer.Option("--vertices", help="Vertex count of the generated contour", min=3),
    ] = 32,
    size: Annotated[
        float,
        typer.Option("--size", help="Circumradius of the generated contour"),
    ] = 30.0,
    center: Annotated[
        str,
        typer.Option("--center", help="Center of the generated contour as x,y"),
    ] = "50,50",
    width: Annotated[
        float,
        typer.Option("--width", help="Image width in model units"),
    ] = 100.0,
    height: Annotated[
        float,
        typer.Option("--height", help="Image height in model units"),
    ] = 100.0,
    scale_x: Annotated[
        float,
        typer.Option("--scale-x", help="Display units per model unit along x"),
    ] = 1.0,
    scale_y: Annotated[
        float,
        typer.Option("--scale-y", help="Display units per model unit along y"),
    ] = 1.0,
    fade_alpha: Annotated[
        float,
        typer.Option("--fade-alpha", help="Alpha of a distant hover cursor (clamped to 0-1)"),
    ] = 0.5,
    fade_distance: Annotated[
        float,
        typer.Option("--fade-distance", help="Fade beyond this many radii (at least 1)"),
    ] = 1.2,
    no_limit: Annotated[
        bool,
        typer.Option("--no-limit", help="Do not limit the brush radius by contour area"),
    ] = False,
    no_hover: Annotated[
        bool,
        typer.Option("--no-hover", help="Disable the hover cursor"),
    ] = False,
) -> None:
    """Show the brush radius and hover cursor for a cursor position.

    Example:
        sculptor preview 95,50 --scale-x 2
    """
    cursor_point = parse_point(cursor, "CURSOR")

    try:
        config = BrushConfig(
            limit_radius_outside_region=not no_limit,
            show_cursor_on_hover=not no_hover,
            hover_cursor_fade_alpha=fade_alpha,
            hover_cursor_fade_distance=fade_distance,
        )
    except ValidationError as e:
        print_error("Invalid brush settings", details=str(e))
        raise typer.Exit(code=1)

    try:
        contour = _build_contour(center, size, vertices)
        bounds = BoundingBox(width, height)
        viewport = Viewport(scale_x=scale_x, scale_y=scale_y)
        sculptor = Sculptor(config)

        radius_model = sculptor.preview_radius(
            contour,
            cursor_point,
            bounds,
            clamp_to_area=config.limit_radius_outside_region,
            space=CoordinateSpace.MODEL,
        )
        hover = sculptor.hover_preview(contour, cursor_point, bounds, viewport)
    except SculptorError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_step(f"Cursor at {cursor_point.x:g},{cursor_point.y:g}")
    print_hover_preview(hover, radius_model)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
