"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""


from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from sculptor.core.geometry import distance
from sculptor.domain import Contour, HoverPreview

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for stroke replay.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Sculptor[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def spacing_range(contour: Contour) -> tuple[float, float]:
    """Shortest and longest edge of a contour."""
    lengths = [distance(s.start, s.end) for s in contour.segments()]
    return min(lengths), max(lengths)


def print_contour_info(contour: Contour, label: str) -> None:
    """Print vertex count, area and spacing of a contour.

    Args:
        contour: Contour to describe
        label: Short label for the line (e.g. "before")
    """
    shortest, longest = spacing_range(contour)
    console.print(
        f"  {label:<7} {len(contour):,} vertices {SYM_DOT} area {contour.area:,.1f} "
        f"{SYM_DOT} spacing {shortest:.2f}–{longest:.2f}"
    )


def print_radius_info(radius_model: float, radius_display: float, color: str) -> None:
    """Print the brush radius in both coordinate spaces and the cursor color."""
    console.print(
        f"  brush radius {radius_model:.2f} (model) {SYM_DOT} {radius_display:.2f} (display) "
        f"{SYM_DOT} {color}"
    )


def print_stroke_summary(
    steps: int,
    idle_steps: int,
    pushed: int,
    inserted: int,
    merged: int,
    total_time_s: float,
) -> None:
    """Print success message with stroke summary.

    Args:
        steps: Number of drag steps replayed
        idle_steps: Steps where the brush touched no vertex
        pushed: Total vertices pushed
        inserted: Total vertices inserted
        merged: Total vertices merged away
        total_time_s: Stroke duration in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column(justify="right")
    table.add_row("Steps", f"{steps} ({idle_steps} idle)")
    table.add_row("Pushed", str(pushed))
    table.add_row("Inserted", str(inserted))
    table.add_row("Merged", str(merged))
    console.print(table)


def print_hover_preview(preview: HoverPreview | None, radius_model: float) -> None:
    """Print hover cursor details.

    Args:
        preview: Hover cursor, or None when hover previews are disabled
        radius_model: Model-space brush radius at the same position
    """
    console.print(f"  model radius    {radius_model:.3f}")
    if preview is None:
        console.print("  hover preview   disabled")
        return
    fade = " (faded)" if preview.faded else ""
    console.print(f"  display radius  {preview.radius:.3f}")
    console.print(f"  alpha           {preview.alpha:.2f}{fade}")
    console.print(f"  color           {preview.color}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
