"""Core functionalities: stateless, immutable primitives.

Architecture Note:
    core/ contains pure values and functions with no runtime state mutation.
    For a stateful undo manager built on top of them, see timeline/.
"""

from undoable.core.history import (
    History,
    back,
    current,
    evolve,
    forward,
    from_list,
    map_history,
    new,
    to,
)
from undoable.core.stack import Stack

__all__ = [
    # Stack
    "Stack",
    # History
    "History",
    "new",
    "from_list",
    "current",
    "back",
    "forward",
    "to",
    "evolve",
    "map_history",
]
