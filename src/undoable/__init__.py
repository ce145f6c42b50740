"""undoable: an immutable past/present/future history for undo and redo.

Usage:
    from undoable import History

    h0 = History.new(0)
    h2 = h0.to(1).to(2)          # current=2, past=[1, 0]
    h3 = h2.back()               # current=1, future=[2]
    assert h3.forward() == h2
    h5 = h3.to(99)               # current=99, future [2] discarded

    # Function style
    from undoable import back, current, new, to

    assert current(back(to(1, new(0)))) == 0
"""

__version__ = "0.1.0"

# Core primitives
from undoable.core import (
    History,
    Stack,
    back,
    current,
    evolve,
    forward,
    from_list,
    map_history,
    new,
    to,
)

# Configuration
from undoable.config import TimelineSettings

# Stateful holder
from undoable.timeline import Timeline

__all__ = [
    # Version
    "__version__",
    # Core
    "History",
    "Stack",
    "new",
    "from_list",
    "current",
    "back",
    "forward",
    "to",
    "evolve",
    "map_history",
    # Config
    "TimelineSettings",
    # Timeline
    "Timeline",
]
