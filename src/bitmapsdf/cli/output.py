"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with step indicators, tables, and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from bitmapsdf.core import ChannelOutcome, ChannelStatus

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

_STATUS_STYLES = {
    ChannelStatus.RENDERED: "green",
    ChannelStatus.FILLED: "yellow",
    ChannelStatus.UNCHANGED: "dim",
}


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Bitmapsdf[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_bitmap_info(bitmap_path: str, pixel_format: str, width: int, height: int) -> None:
    """Print source bitmap information.

    Args:
        bitmap_path: Path to the bitmap file
        pixel_format: Pixel layout name (e.g., "RGBA8")
        width: Width in pixels
        height: Height in pixels
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(bitmap_path)
    line.append(f" ({pixel_format})")
    console.print(line)
    console.print(f"  {width} x {height} pixels")


def print_conversion_info(mode: str, width: int, height: int, field_distance: float) -> None:
    """Print the resolved conversion parameters."""
    console.print(
        f"  {mode} {SYM_DOT} {width} x {height} output {SYM_DOT} "
        f"{field_distance:.2f} px field distance"
    )


def print_channels(outcomes: list[ChannelOutcome]) -> None:
    """Print a table of per-channel outcomes."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Channel")
    table.add_column("Result")
    table.add_column("Crossings", justify="right")
    table.add_column("Segments", justify="right")
    table.add_column("Note")

    for outcome in outcomes:
        style = _STATUS_STYLES[outcome.status]
        table.add_row(
            outcome.role.value,
            f"[{style}]{outcome.status.value}[/{style}]",
            str(outcome.intersections),
            str(outcome.edges),
            outcome.reason or "",
        )

    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(output_path: str, file_size: str, total_time_s: float, rendered: int) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total conversion time in seconds
        rendered: Number of channels holding a distance field
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    plural = "channel" if rendered == 1 else "channels"
    console.print(f"  {rendered} {plural} rendered")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"\n[bold yellow]{SYM_DOT} Warning:[/bold yellow] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
