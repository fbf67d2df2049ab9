"""CLI application entry point for splatcover.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from splatcover import __version__
from splatcover.cli.output import (
    console,
    print_area,
    print_circles_info,
    print_error,
    print_header,
    print_step,
)
from splatcover.config import (
    LoggingConfig,
    SamplingConfig,
    SplatConfig,
    SplatCoverSettings,
)
from splatcover.core import SplatPosition, SplatSurface
from splatcover.exceptions import SplatCoverError
from splatcover.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="splatcover",
    help="Estimate the area covered by a set of overlapping circles.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Splatcover[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_numbers(text: str, count: int, label: str) -> tuple[float, ...]:
    """Parse a comma-separated list of exactly `count` numbers.

    Args:
        text: Raw option value, e.g. "1.5,-2,0.5"
        count: Expected number of values
        label: Expected format, used in the error message

    Returns:
        Parsed values

    Raises:
        typer.BadParameter: If the value is malformed
    """
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != count:
        raise typer.BadParameter(f"expected {label}, got '{text}'")
    try:
        return tuple(float(p) for p in parts)
    except ValueError:
        raise typer.BadParameter(f"expected {label}, got '{text}'") from None


@app.command()
def estimate(
    circles: Annotated[
        list[str] | None,
        typer.Option(
            "--circle",
            "-c",
            help="Circle as X,Y,R (repeatable)",
        ),
    ] = None,
    points: Annotated[
        list[str] | None,
        typer.Option(
            "--point",
            "-p",
            help="Splat centre as X,Y using --radius (repeatable)",
        ),
    ] = None,
    radius: Annotated[
        float,
        typer.Option(
            "--radius",
            help="Radius of splats given with --point",
        ),
    ] = 0.5,
    resolution: Annotated[
        int,
        typer.Option(
            "--resolution",
            "-r",
            help="Grid samples per axis",
            min=1,
        ),
    ] = 256,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of sampling worker processes (default: in-process)",
            min=1,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print only the area",
        ),
    ] = False,
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
    """Estimate the area covered by the union of the given circles.

    Overlapping regions are counted once. The area is estimated by sampling a
    uniform grid over the bounding box of all circles.

    Example:
        splatcover -c 0,0,1 -c 10,10,1

    This prints an area of about 6.28.
    """
    try:
        circle_values = [parse_numbers(c, 3, "X,Y,R") for c in circles or []]
        point_values = [parse_numbers(p, 2, "X,Y") for p in points or []]
    except typer.BadParameter as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    try:
        settings = SplatCoverSettings(
            sampling=SamplingConfig(grid_resolution=resolution, max_workers=workers),
            splat=SplatConfig(radius=radius),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValidationError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    try:
        surface = SplatSurface(settings=settings, logger=logger)

        for x, y, r in circle_values:
            surface.place_splat(SplatPosition(x, y), radius=r)
        for x, y in point_values:
            surface.place_splat(SplatPosition(x, y))

        if not quiet:
            print_step("Circles")
            print_circles_info(surface.splat_count, surface.estimator.bounding_box())
            print_step("Sampling")

        start_time = time.time()
        area = surface.display_volume()
        total_time_s = time.time() - start_time

    except SplatCoverError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if quiet:
        console.print(f"{area:.6f}")
    else:
        print_area(
            area=area,
            resolution=resolution,
            total_time_s=total_time_s,
            circle_areas=sum(c.area() for c in surface.estimator.circles),
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
