"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for Timeline.

Usage:
    from undoable.config import TimelineSettings

    # Load from environment variables (UNDOABLE_*)
    settings = TimelineSettings()

    # Or override with explicit values
    settings = TimelineSettings(max_past=100)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TimelineSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for Timeline.

    Attributes:
        max_past: Maximum number of past values kept after each commit
            (None for unbounded).
        log_boundary: Log a debug record when undo/redo is requested
            with nothing to navigate to.

    Environment Variables:
        UNDOABLE_MAX_PAST
        UNDOABLE_LOG_BOUNDARY
    """

    model_config = SettingsConfigDict(
        env_prefix="UNDOABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_past: int | None = Field(default=None, ge=0)
    log_boundary: bool = False
