"""Configuration management for handscript.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CanvasConfig: Drawing canvas geometry and ink threshold
- TracingConfig: Boundary tracing and simplification settings
- MetricsConfig: Advance width estimation settings
- FontConfig: Font naming and vertical metrics
- ProcessingConfig: Worker settings
- LoggingConfig: Logging settings
- HandscriptSettings: Main application settings
"""

from handscript.config.settings import (
    CanvasConfig,
    FontConfig,
    HandscriptSettings,
    LoggingConfig,
    MetricsConfig,
    ProcessingConfig,
    TracingConfig,
    get_default_settings,
)

__all__ = [
    "CanvasConfig",
    "FontConfig",
    "HandscriptSettings",
    "LoggingConfig",
    "MetricsConfig",
    "ProcessingConfig",
    "TracingConfig",
    "get_default_settings",
]
