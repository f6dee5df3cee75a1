"""CLI application entry point for handscript.

This module provides the main CLI interface using Typer.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from handscript import __version__
from handscript.cli.output import (
    SYM_OK,
    console,
    create_progress,
    print_cancellation_notice,
    print_coverage,
    print_error,
    print_glyph_errors,
    print_header,
    print_processing_info,
    print_step,
    print_success,
    print_trace_table,
)
from handscript.config import (
    CanvasConfig,
    FontConfig,
    HandscriptSettings,
    LoggingConfig,
    ProcessingConfig,
    TracingConfig,
)
from handscript.core import (
    SUPPORTED_CHARACTERS,
    FontProcessor,
    GlyphRecordAssembler,
    classify_image,
)
from handscript.domain import GlyphImage
from handscript.exceptions import (
    AssemblyError,
    FontSaveError,
    HandscriptError,
    ImageLoadError,
)
from handscript.io import FontWriter, GlyphImageReader

# Create the Typer app
app = typer.Typer(
    name="handscript",
    help="Build a TrueType font from hand-drawn glyph images.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Handscript[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def build(
    input_dir: Annotated[
        Path,
        typer.Argument(
            help="Directory of PNG drawings named by character (A.png, period.png, uni0061.png)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {family}.ttf)",
        ),
    ] = None,
    family: Annotated[
        str,
        typer.Option(
            "--family",
            "-f",
            help="Font family name",
        ),
    ] = "Handscript",
    style: Annotated[
        str,
        typer.Option(
            "--style",
            help="Font style name",
        ),
    ] = "Regular",
    units_per_em: Annotated[
        int,
        typer.Option(
            "--units-per-em",
            help="Design units per em",
            min=16,
            max=16384,
        ),
    ] = 1000,
    canvas_size: Annotated[
        int,
        typer.Option(
            "--canvas-size",
            help="Width and height of every drawing in pixels",
            min=8,
        ),
    ] = 300,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Outline simplification tolerance in pixels (0 keeps every point)",
            min=0.0,
            max=50.0,
        ),
    ] = 2.0,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto, 1 = no worker processes)",
            min=1,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Trace every drawing and report contours without writing a font",
        ),
    ] = False,
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
    """Build a TrueType font from a directory of hand-drawn glyph images.

    Every drawing is traced into a polygonal outline and placed on a shared
    baseline. Characters without a drawing are simply absent from the font.

    Example:
        handscript drawings/ -o MyHand.ttf --family "My Hand"
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_dir.is_dir():
        print_error(
            f"Input directory not found: {input_dir}",
            details="Please provide a directory of PNG drawings.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = HandscriptSettings(
        canvas=CanvasConfig(size=canvas_size),
        tracing=TracingConfig(simplify_tolerance=tolerance),
        font=FontConfig(
            family_name=family,
            style_name=style,
            units_per_em=units_per_em,
        ),
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    try:
        if not quiet:
            print_step("Loading drawings")

        reader = GlyphImageReader(input_dir)
        images = reader.load()

        if not quiet:
            print_coverage(
                drawn=list(images),
                supported=SUPPORTED_CHARACTERS,
                skipped_files=[p.name for p in reader.skipped],
                verbose=verbose,
            )

        if not images:
            print_error(
                "No drawings found",
                details="Draw at least one character before generating the font.",
            )
            raise typer.Exit(code=1)

        if dry_run:
            _handle_dry_run(images, settings, quiet)
            raise typer.Exit(code=0)

        output_path = output or FontWriter.default_output_path(
            settings.font.to_metadata()
        )

        if not quiet:
            actual_workers = workers if workers else os.cpu_count() or 1
            print_step("Building font")
            print_processing_info(actual_workers, is_auto=(workers is None))

        processor = FontProcessor(settings)

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task(
                        f"Tracing {len(images)} glyphs",
                        total=len(images),
                    )

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    stats = processor.process(
                        images,
                        output_path=output_path,
                        progress_callback=update_progress,
                    )
            else:
                stats = processor.process(images, output_path=output_path)
        except KeyboardInterrupt:
            if not quiet:
                print_cancellation_notice()
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        if not quiet:
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=stats.duration_seconds,
                processed=stats.processed_count,
                empty=stats.empty_count,
                errors=stats.error_count,
                avg_time_ms=stats.avg_glyph_time_ms,
            )
            if stats.errors:
                print_glyph_errors(stats.errors)

    except ImageLoadError as e:
        print_error(f"Could not load drawing: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except AssemblyError as e:
        print_error(f"Could not build font: {e.reason}")
        raise typer.Exit(code=1)
    except FontSaveError as e:
        print_error(f"Could not save font: {e.reason}")
        raise typer.Exit(code=1)
    except HandscriptError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _handle_dry_run(
    images: dict[str, GlyphImage], settings: HandscriptSettings, quiet: bool
) -> None:
    """Handle --dry-run mode.

    Args:
        images: Drawings keyed by character
        settings: Handscript settings
        quiet: Suppress output
    """
    if not quiet:
        print_step("Tracing (dry run)")

    assembler = GlyphRecordAssembler(settings)
    rows: list[tuple[str, str, int, int]] = []
    failures: list[tuple[str, str]] = []

    for character, image in images.items():
        try:
            mask = classify_image(
                image,
                threshold=settings.canvas.ink_threshold,
                canvas_size=settings.canvas.size,
            )
            record = assembler.assemble_glyph(character, mask)
        except (HandscriptError, ValueError) as e:
            failures.append((character, str(e)))
            continue
        rows.append(
            (
                character,
                record.name,
                len(record.outline.contours),
                record.metrics.advance_width,
            )
        )

    if not quiet:
        print_trace_table(rows)
        if failures:
            print_glyph_errors(failures)
        console.print(f"\n[bold green]{SYM_OK} Dry run complete[/bold green] – no font written")


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "28 KB")
    """
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
