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
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for glyph processing.

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
    console.print(f"\n[bold]Handscript[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_coverage(
    drawn: list[str],
    supported: str,
    skipped_files: list[str],
    verbose: bool,
) -> None:
    """Print how much of the supported character set has been drawn.

    Args:
        drawn: Characters with a drawing
        supported: The supported character set
        skipped_files: File names that did not name a character
        verbose: Whether to list missing characters and skipped files
    """
    done = sum(1 for c in supported if c in drawn)
    extra = [c for c in drawn if c not in supported]
    console.print(f"  [green]{done}[/green] of {len(supported)} characters drawn")
    if extra:
        console.print(f"  {len(extra)} additional: {' '.join(extra)}")

    if verbose:
        missing = [c for c in supported if c not in drawn]
        if missing:
            console.print(Text(f"  missing: {' '.join(missing)}"))
        for name in skipped_files:
            console.print(Text(f"  skipped {name} (not a character name)"))


def print_trace_table(rows: list[tuple[str, str, int, int]]) -> None:
    """Print per-glyph tracing results.

    Args:
        rows: (character, glyph name, contour count, advance width) tuples
    """
    table = Table(box=None, padding=(0, 2), show_edge=False)
    table.add_column("char")
    table.add_column("glyph")
    table.add_column("contours", justify="right")
    table.add_column("advance", justify="right")
    for character, name, contours, advance in rows:
        style = "yellow" if contours == 0 else None
        table.add_row(Text(character), name, str(contours), str(advance), style=style)
    console.print(table)


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


def print_processing_info(workers: int, is_auto: bool = False) -> None:
    """Print processing configuration.

    Args:
        workers: Number of parallel workers
        is_auto: Whether the count was auto-detected
    """
    auto_suffix = " (auto)" if is_auto else ""
    console.print(f"  {workers} workers{auto_suffix} {SYM_DOT} Ctrl+C to cancel")


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    processed: int,
    empty: int,
    errors: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total processing time in seconds
        processed: Number of glyphs processed
        empty: Number of glyphs that produced no contours
        errors: Number of glyphs that failed
        avg_time_ms: Average processing time per glyph in milliseconds
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    empty_style = "yellow" if empty > 0 else "green"
    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} glyphs {SYM_DOT} [{empty_style}]{empty} blank[/{empty_style}] "
        f"{SYM_DOT} [{error_style}]{errors} errors[/{error_style}]"
    )

    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.1f}ms avg per glyph")


def print_glyph_errors(errors: list[tuple[str, str]]) -> None:
    """Print the characters left out of the font and why."""
    for character, message in errors:
        line = Text(f"  {SYM_ERR} ")
        line.append(character, style="bold")
        line.append(f": {message}")
        console.print(line, style="red")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_notice() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print("  No output file created")
