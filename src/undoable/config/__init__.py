"""Configuration module using Pydantic Settings.

Usage:
    from undoable.config import TimelineSettings

    settings = TimelineSettings(max_past=50)
"""

from undoable.config.settings import TimelineSettings

__all__ = [
    "TimelineSettings",
]
