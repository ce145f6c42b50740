"""Stack functionality: the persistent back/forward stacks of a History."""

from undoable.core.stack.models import Stack

__all__ = [
    "Stack",
]
