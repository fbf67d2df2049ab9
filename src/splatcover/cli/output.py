"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages and a summary table.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from splatcover.domain import BoundingBox

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Splatcover[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_circles_info(count: int, bbox: BoundingBox | None) -> None:
    """Print circle set information.

    Args:
        count: Number of circles in the set
        bbox: Bounding box of the set, None when empty
    """
    plural = "circle" if count == 1 else "circles"
    console.print(f"  {count} {plural}")
    if bbox is not None:
        console.print(
            f"  x {bbox.min_x:g} to {bbox.max_x:g} {SYM_DOT} "
            f"y {bbox.min_y:g} to {bbox.max_y:g}"
        )


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


def print_area(
    area: float,
    resolution: int,
    total_time_s: float,
    circle_areas: float | None = None,
) -> None:
    """Print the estimated area with a short summary.

    Args:
        area: Estimated covered area
        resolution: Grid samples per axis
        total_time_s: Time spent sampling in seconds
        circle_areas: Sum of the exact circle areas (overlaps counted twice)
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}"
    )

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column(justify="right")
    table.add_row("Covered area", f"[bold]{area:.6f}[/bold]")
    table.add_row("Grid", f"{resolution} x {resolution}")
    if circle_areas is not None:
        table.add_row("Sum of circle areas", f"{circle_areas:.6f}")
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    line = Text(f"\n{SYM_ERR} Error: ", style="bold red")
    line.append(message)
    console.print(line)
    if details:
        # Use Text so bracketed validation output is not read as markup
        console.print(Text(f"  {details}"))
