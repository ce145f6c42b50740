"""Timeline: a stateful undo/redo holder built on the pure core."""

from undoable.timeline.timeline import Timeline

__all__ = [
    "Timeline",
]
