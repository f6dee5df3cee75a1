"""Parallel processing orchestration for the font build pipeline.

This module coordinates the full build workflow with parallel processing
of individual characters using ProcessPoolExecutor.

Key components:
- process_character: Top-level picklable function for parallel execution
- FontProcessor: Main orchestrator class for font builds
"""

import time
import traceback
from collections.abc import Callable, Mapping
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from handscript.config import HandscriptSettings
from handscript.core.assembler import GlyphRecordAssembler
from handscript.core.classifier import classify_image
from handscript.domain import GlyphImage, GlyphRecord
from handscript.io.writer import FontWriter
from handscript.utils import ProcessingLogger, ProcessingStats, configure_logging

ProgressCallback = Callable[[int, int, str, bool], None]


def process_character(
    image_dict: dict[str, Any],
    settings_dict: dict[str, Any],
) -> dict[str, Any]:
    """Run the vector pipeline for one drawn character.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Deserializes the drawing, classifies, traces, simplifies, maps and
    measures it, and returns the serialized record.

    Args:
        image_dict: Serialized drawing (from GlyphImage.to_dict())
        settings_dict: Serialized settings (from HandscriptSettings.model_dump())

    Returns:
        Dictionary containing either:
        - Success: {"record": record_dict, "duration_ms": float}
        - Error: {"error": str, "error_type": str, "character": str,
          "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        image = GlyphImage.from_dict(image_dict)
        settings = HandscriptSettings(**settings_dict)

        mask = classify_image(
            image,
            threshold=settings.canvas.ink_threshold,
            canvas_size=settings.canvas.size,
        )
        record = GlyphRecordAssembler(settings).assemble_glyph(image.character, mask)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "record": record.to_dict(),
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "error_type": type(e).__name__,
            "character": image_dict.get("character", "unknown"),
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class FontProcessor:
    """Orchestrates a font build from drawn characters.

    Manages the complete workflow:
    1. Run the vector pipeline for every character, in parallel
    2. Collect results and update statistics
    3. Assemble records, adding .notdef and space
    4. Hand the records to the font writer

    A character whose pipeline fails is left out of the font and reported
    in the statistics; a failure of the font writer fails the whole build.

    Example:
        settings = HandscriptSettings()
        processor = FontProcessor(settings)
        stats = processor.process(images, output_path=Path("Handscript.ttf"))
    """

    def __init__(self, config: HandscriptSettings) -> None:
        """Initialize font processor with configuration.

        Args:
            config: Handscript settings
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )
        self.assembler = GlyphRecordAssembler(config)

    def build_records(
        self,
        images: Mapping[str, GlyphImage],
        stats: ProcessingStats | None = None,
        max_workers: int | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> list[GlyphRecord]:
        """Run the pipeline for every character and assemble the records.

        Args:
            images: Drawings keyed by character; read, never modified
            stats: Statistics object to update (a fresh one if None)
            max_workers: Maximum worker processes (None = config default)
            progress_callback: Optional callback(completed, total, character, success)

        Returns:
            Ordered records: .notdef, space, then drawn glyphs in input order
        """
        if stats is None:
            stats = ProcessingStats()
        if max_workers is None:
            max_workers = self.config.processing.max_workers

        processing_logger = ProcessingLogger(self.logger, stats)
        tasks = {character: image.to_dict() for character, image in images.items()}
        settings_dict = self.config.model_dump()

        if max_workers == 1:
            results = self._run_sequential(tasks, settings_dict, processing_logger, progress_callback)
        else:
            results = self._run_parallel(
                tasks, settings_dict, max_workers, processing_logger, progress_callback
            )

        # Completion order varies between runs; input order does not
        ordered = {
            character: results[character]
            for character in images
            if character in results
        }
        return self.assembler.collect(ordered)

    def process(
        self,
        images: Mapping[str, GlyphImage],
        output_path: Path | None = None,
        max_workers: int | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> ProcessingStats:
        """Build a font from drawings and save it.

        Args:
            images: Drawings keyed by character
            output_path: Path for output font (``<family>.ttf`` if None)
            max_workers: Maximum worker processes (None = config default)
            progress_callback: Optional callback(completed, total, character, success)

        Returns:
            ProcessingStats with counts, timing, and error details

        Raises:
            AssemblyError: If the font cannot be assembled
            FontSaveError: If the font file cannot be written
            KeyboardInterrupt: If processing is cancelled by user
        """
        stats = ProcessingStats()
        stats.start_time = time.time()

        metadata = self.config.font.to_metadata()
        if output_path is None:
            output_path = FontWriter.default_output_path(metadata)

        self.logger.info(
            "Starting font build",
            characters=len(images),
            output=str(output_path),
            max_workers=max_workers or self.config.processing.max_workers,
        )

        records = self.build_records(
            images,
            stats=stats,
            max_workers=max_workers,
            progress_callback=progress_callback,
        )

        writer = FontWriter(metadata)
        writer.save(records, output_path)

        stats.end_time = time.time()
        self.logger.info(
            "Font saved",
            output=str(output_path),
            glyphs=len(records),
            processed=stats.processed_count,
            empty=stats.empty_count,
            errors=stats.error_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return stats

    def _record_result(
        self,
        character: str,
        result: dict[str, Any],
        processing_logger: ProcessingLogger,
    ) -> GlyphRecord | None:
        """Log one worker result and deserialize its record."""
        if "error" in result:
            processing_logger.log_glyph_error(
                character=result["character"],
                error=Exception(result["error"]),
                traceback=result.get("traceback"),
            )
            return None

        record = GlyphRecord.from_dict(result["record"])
        processing_logger.log_glyph_complete(
            glyph_name=record.name,
            contours=len(record.outline.contours),
            advance_width=record.metrics.advance_width,
            duration_ms=result.get("duration_ms", 0.0),
        )
        return record

    def _run_sequential(
        self,
        tasks: dict[str, dict[str, Any]],
        settings_dict: dict[str, Any],
        processing_logger: ProcessingLogger,
        progress_callback: ProgressCallback | None,
    ) -> dict[str, GlyphRecord]:
        """Process characters one after another in this process."""
        records: dict[str, GlyphRecord] = {}
        total = len(tasks)

        for completed, (character, image_dict) in enumerate(tasks.items(), start=1):
            processing_logger.log_glyph_start(character)
            result = process_character(image_dict, settings_dict)
            record = self._record_result(character, result, processing_logger)
            if record is not None:
                records[character] = record
            if progress_callback is not None:
                progress_callback(completed, total, character, record is not None)

        return records

    def _run_parallel(
        self,
        tasks: dict[str, dict[str, Any]],
        settings_dict: dict[str, Any],
        max_workers: int | None,
        processing_logger: ProcessingLogger,
        progress_callback: ProgressCallback | None,
    ) -> dict[str, GlyphRecord]:
        """Process characters in parallel using ProcessPoolExecutor."""
        records: dict[str, GlyphRecord] = {}
        stats = processing_logger.stats

        self.logger.info(
            "Starting parallel processing",
            glyph_count=len(tasks),
            max_workers=max_workers,
        )

        total = len(tasks)
        completed = 0
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for character, image_dict in tasks.items():
                processing_logger.log_glyph_start(character)
                future = executor.submit(process_character, image_dict, settings_dict)
                pending_futures[future] = character

            try:
                for future in as_completed(list(pending_futures)):
                    character = pending_futures.pop(future)
                    record = None

                    try:
                        record = self._record_result(
                            character, future.result(), processing_logger
                        )
                    except Exception as e:
                        # Executor-level error
                        processing_logger.log_glyph_error(
                            character=character,
                            error=e,
                            traceback=traceback.format_exc(),
                        )

                    if record is not None:
                        records[character] = record

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, character, record is not None)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)

                executor.shutdown(wait=True, cancel_futures=True)
                raise

        return records
