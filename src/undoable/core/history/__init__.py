"""History functionality: the zipper model and its functional operations."""

from undoable.core.history.models import History
from undoable.core.history.operations import (
    back,
    current,
    evolve,
    forward,
    from_list,
    map_history,
    new,
    to,
)

__all__ = [
    # Models
    "History",
    # Operations
    "new",
    "from_list",
    "current",
    "back",
    "forward",
    "to",
    "evolve",
    "map_history",
]
