"""Configuration settings for Handscript."""

from pathlib import Path

from pydantic import BaseModel, Field

from handscript.domain.glyph import FontMetadata


class CanvasConfig(BaseModel):
    """Geometry of the drawing canvas every glyph is drawn on.

    All glyphs processed in one session share the same square canvas.
    """

    size: int = Field(
        default=300,
        ge=8,
        le=4096,
        description="Canvas width and height in pixels",
    )
    baseline_ratio: float = Field(
        default=0.8,
        gt=0.0,
        le=1.0,
        description="Baseline position as a fraction of canvas height from the top",
    )
    ink_threshold: int = Field(
        default=160,
        ge=1,
        le=255,
        description="Pixels with mean channel intensity below this are ink",
    )


class TracingConfig(BaseModel):
    """Configuration for boundary tracing and polygon simplification."""

    min_contour_points: int = Field(
        default=4,
        ge=1,
        description="Traces with fewer distinct points are discarded",
    )
    simplify_tolerance: float = Field(
        default=2.0,
        ge=0.0,
        le=50.0,
        description="Maximum deviation in pixels for dropped points",
    )
    min_outline_points: int = Field(
        default=3,
        ge=3,
        description="Simplified contours with fewer points are dropped",
    )


class MetricsConfig(BaseModel):
    """Configuration for advance width estimation."""

    right_margin: int = Field(
        default=20,
        ge=0,
        description="Pixels added right of the rightmost ink column",
    )
    min_advance_width: int = Field(
        default=100,
        ge=1,
        description="Advance width floor in font units",
    )
    space_advance_ratio: float = Field(
        default=0.35,
        gt=0.0,
        le=2.0,
        description="Space glyph advance as a fraction of the em",
    )
    notdef_advance_ratio: float = Field(
        default=0.5,
        gt=0.0,
        le=2.0,
        description=".notdef glyph advance as a fraction of the em",
    )


class FontConfig(BaseModel):
    """Font-level naming and vertical metrics."""

    family_name: str = Field(
        default="Handscript",
        description="Font family name",
    )
    style_name: str = Field(
        default="Regular",
        description="Font style name",
    )
    version: str = Field(
        default="1.0",
        description="Font version string",
    )
    units_per_em: int = Field(
        default=1000,
        ge=16,
        le=16384,
        description="Design units per em",
    )
    ascender_ratio: float = Field(
        default=0.8,
        ge=0.0,
        le=2.0,
        description="Ascender as a fraction of the em",
    )
    descender_ratio: float = Field(
        default=-0.2,
        ge=-2.0,
        le=0.0,
        description="Descender as a fraction of the em (negative)",
    )

    def to_metadata(self) -> FontMetadata:
        """Build the font-level metadata handed to the font writer."""
        return FontMetadata(
            family_name=self.family_name,
            style_name=self.style_name,
            units_per_em=self.units_per_em,
            ascender=round(self.units_per_em * self.ascender_ratio),
            descender=round(self.units_per_em * self.descender_ratio),
            version=self.version,
        )


class ProcessingConfig(BaseModel):
    """Configuration for glyph processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto, 1 = in-process)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class HandscriptSettings(BaseModel):
    """Main application settings."""

    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    tracing: TracingConfig = Field(default_factory=TracingConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)
    font: FontConfig = Field(default_factory=FontConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def scale(self) -> float:
        """Font units per canvas pixel."""
        return self.font.units_per_em / self.canvas.size


def get_default_settings() -> HandscriptSettings:
    """Get default application settings."""
    return HandscriptSettings()
