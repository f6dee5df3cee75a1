"""Logging utilities for Handscript."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_NAME = "handscript"


@dataclass
class ProcessingStats:
    """Statistics from a font build."""

    processed_count: int = 0
    empty_count: int = 0
    error_count: int = 0
    contour_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    glyph_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None
    was_cancelled: bool = False
    cancelled_count: int = 0

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_glyph_time_ms(self) -> float | None:
        """Average per-glyph processing time."""
        if not self.glyph_timings_ms:
            return None
        return sum(self.glyph_timings_ms) / len(self.glyph_timings_ms)

    @property
    def min_glyph_time_ms(self) -> float | None:
        if not self.glyph_timings_ms:
            return None
        return min(self.glyph_timings_ms)

    @property
    def max_glyph_time_ms(self) -> float | None:
        if not self.glyph_timings_ms:
            return None
        return max(self.glyph_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("handscript")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking processing progress and statistics."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger,
        stats: ProcessingStats | None = None,
    ) -> None:
        self._logger = logger
        self._stats = stats if stats is not None else ProcessingStats()

    def log_glyph_start(self, character: str) -> None:
        """Log start of glyph processing."""
        self._logger.debug("Processing glyph", character=character)

    def log_glyph_complete(
        self,
        glyph_name: str,
        contours: int,
        advance_width: int,
        duration_ms: float,
    ) -> None:
        """Log successful glyph processing."""
        self._logger.info(
            "Glyph processed",
            glyph=glyph_name,
            contours=contours,
            advance_width=advance_width,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.contour_count += contours
        self._stats.glyph_timings_ms.append(duration_ms)
        if contours == 0:
            self._stats.empty_count += 1

    def log_glyph_error(
        self,
        character: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log glyph processing error."""
        self._logger.error(
            "Glyph processing failed",
            character=character,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((character, str(error)))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
