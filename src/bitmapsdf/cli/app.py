"""CLI application entry point for bitmapsdf.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from bitmapsdf import __version__
from bitmapsdf.cli.output import (
    console,
    print_bitmap_info,
    print_channels,
    print_conversion_info,
    print_error,
    print_header,
    print_step,
    print_success,
    print_warning,
)
from bitmapsdf.config import (
    DistanceFieldConfig,
    DistanceMode,
    LoggingConfig,
    ProcessingConfig,
    RGBAMode,
    SdfSettings,
)
from bitmapsdf.core import SdfConverter
from bitmapsdf.domain import ChannelRole
from bitmapsdf.exceptions import BitmapLoadError, BitmapSaveError, BitmapSdfError
from bitmapsdf.io import BitmapReader, BitmapWriter
from bitmapsdf.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="bitmapsdf",
    help="Convert antialiased bitmaps into signed distance fields.",
    add_completion=False,
    no_args_is_help=True,
)

_CHANNEL_ALIASES = {
    "r": ChannelRole.RED,
    "g": ChannelRole.GREEN,
    "b": ChannelRole.BLUE,
    "a": ChannelRole.ALPHA,
}

_DISTANCE_FIELDS = {
    DistanceMode.NORMALIZED: "normalized_distance",
    DistanceMode.PIXELS: "pixel_distance",
    DistanceMode.ABSOLUTE: "absolute_distance",
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Bitmapsdf[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_channels(value: str) -> set[ChannelRole]:
    """Parse a comma separated channel list such as ``r,g,b,a`` or ``alpha``.

    Raises:
        ValueError: If an entry names no channel role
    """
    roles: set[ChannelRole] = set()
    for entry in value.split(","):
        name = entry.strip().lower()
        if not name:
            continue
        roles.add(_CHANNEL_ALIASES.get(name) or ChannelRole(name))
    return roles


@app.command()
def convert(
    input_bitmap: Annotated[
        Path,
        typer.Argument(
            help="Path to input bitmap (PNG, TGA, BMP, ...)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-sdf.{ext})",
        ),
    ] = None,
    mode: Annotated[
        str,
        typer.Option(
            "--mode",
            "-m",
            help="Channel handling (preserve_rgb|resample)",
        ),
    ] = "resample",
    size: Annotated[
        int,
        typer.Option(
            "--size",
            "-s",
            help="Output size of the shorter side in resample mode",
            min=1,
        ),
    ] = 64,
    distance_mode: Annotated[
        str,
        typer.Option(
            "--distance-mode",
            "-d",
            help="How --distance is measured (normalized|pixels|absolute)",
        ),
    ] = "pixels",
    distance: Annotated[
        float | None,
        typer.Option(
            "--distance",
            help="Field distance for the chosen distance mode",
        ),
    ] = None,
    invert: Annotated[
        bool,
        typer.Option(
            "--invert",
            help="Invert the distance sign",
        ),
    ] = False,
    grayscale: Annotated[
        bool,
        typer.Option(
            "--grayscale",
            help="Request a single channel output",
        ),
    ] = False,
    channels: Annotated[
        str,
        typer.Option(
            "--channels",
            "-c",
            help="Channels regenerated in resample mode (e.g. r,g,b,a)",
        ),
    ] = "r,g,b,a",
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of worker threads (default: auto)",
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
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
    """Convert a bitmap into a signed distance field.

    Example:
        bitmapsdf icon.png --size 64

    This will create icon-sdf.png, a distance field whose shorter side is
    64 pixels.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_bitmap.exists():
        print_error(
            f"Input file not found: {input_bitmap}",
            details=f"The file '{input_bitmap}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_bitmap.is_file():
        print_error(
            f"Input path is not a file: {input_bitmap}",
            details="Please provide a path to a bitmap image.",
        )
        raise typer.Exit(code=1)

    # Validate enumerated arguments
    try:
        rgba_mode = RGBAMode(mode.lower())
    except ValueError:
        print_error(f"Invalid mode: {mode}", details="Valid values: preserve_rgb, resample")
        raise typer.Exit(code=1)

    try:
        dist_mode = DistanceMode(distance_mode.lower())
    except ValueError:
        print_error(
            f"Invalid distance mode: {distance_mode}",
            details="Valid values: normalized, pixels, absolute",
        )
        raise typer.Exit(code=1)

    try:
        channel_roles = parse_channels(channels)
    except ValueError:
        print_error(
            f"Invalid channel list: {channels}",
            details="Use r, g, b, a or red, green, blue, alpha separated by commas",
        )
        raise typer.Exit(code=1)

    # Create settings from CLI arguments
    field_options: dict[str, object] = {
        "distance_mode": dist_mode,
        "invert_distance": invert,
        "rgba_mode": rgba_mode,
        "texture_size": size,
        "channels": channel_roles,
        "grayscale": grayscale,
    }
    if distance is not None:
        field_options[_DISTANCE_FIELDS[dist_mode]] = distance

    try:
        settings = SdfSettings(
            distance_field=DistanceFieldConfig(**field_options),
            processing=ProcessingConfig(max_workers=workers),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        # Load bitmap
        if not quiet:
            print_step("Loading bitmap")

        try:
            with BitmapReader(input_bitmap) as reader:
                buffer = reader.read()
        except Exception as e:
            raise BitmapLoadError(str(input_bitmap), str(e)) from e

        if not quiet:
            print_bitmap_info(
                bitmap_path=str(input_bitmap),
                pixel_format=buffer.pixel_format.value,
                width=buffer.width,
                height=buffer.height,
            )

        # Convert
        if not quiet:
            print_step("Converting")

        result = SdfConverter(settings, logger=logger).convert(buffer)

        if not quiet:
            print_conversion_info(
                mode="in place" if result.in_place else "resampled",
                width=result.buffer.width,
                height=result.buffer.height,
                field_distance=result.field_distance,
            )
            if verbose:
                print_channels(result.channels)
            if not result.success:
                print_warning("No channel contained contour information")

        # Save
        output_path = output if output is not None else BitmapWriter.get_sdf_path(input_bitmap)
        try:
            BitmapWriter(output_path).save(result.buffer)
        except Exception as e:
            raise BitmapSaveError(str(output_path), str(e)) from e

        if not quiet:
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=result.stats.duration_seconds,
                rendered=len(result.rendered_channels),
            )

    except BitmapLoadError as e:
        print_error(f"Could not load bitmap: {e.reason}")
        raise typer.Exit(code=1)
    except BitmapSaveError as e:
        print_error(f"Could not save bitmap: {e.reason}")
        raise typer.Exit(code=1)
    except BitmapSdfError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "12 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
