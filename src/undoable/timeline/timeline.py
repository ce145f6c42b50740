"""Timeline: stateful undo manager over immutable History snapshots.

Usage:
    timeline = Timeline("")
    timeline.commit("hello")
    timeline.update(str.upper)   # current == "HELLO"
    timeline.undo()              # current == "hello"
    snapshot = timeline.history  # stays valid whatever happens next
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable

from undoable.config import TimelineSettings
from undoable.core.history import History

logger = logging.getLogger(__name__)


class Timeline[T]:
    """Holds the latest History and replaces it on every operation.

    Not thread-safe. Hosts sharing a Timeline across threads must
    synchronise themselves, or pass `history` snapshots around instead.
    """

    def __init__(self, initial: T, settings: TimelineSettings | None = None):
        self._init_settings(settings)
        self._history: History[T] = History.new(initial)

    @classmethod
    def from_history(
        cls, history: History[T], settings: TimelineSettings | None = None
    ) -> Timeline[T]:
        """Wrap an existing History snapshot.

        The depth limit is not applied until the next commit.
        """
        timeline = cls.__new__(cls)
        timeline._init_settings(settings)
        timeline._history = history
        return timeline

    def _init_settings(self, settings: TimelineSettings | None) -> None:
        self._settings = settings or TimelineSettings()
        if self._settings.max_past == 0:
            # Frames: this helper, the constructor, then the caller.
            warnings.warn(
                "Timeline configured with max_past=0: commits will keep no past "
                "and undo() will never move.",
                stacklevel=3,
            )

    @property
    def settings(self) -> TimelineSettings:
        return self._settings

    @property
    def history(self) -> History[T]:
        """Latest immutable snapshot."""
        return self._history

    @property
    def current(self) -> T:
        return self._history.current

    @property
    def can_undo(self) -> bool:
        return self._history.can_back()

    @property
    def can_redo(self) -> bool:
        return self._history.can_forward()

    def commit(self, value: T) -> T:
        """Make value the present. Clears redo history.

        Returns:
            The new current value.
        """
        self._history = self._limit(self._history.to(value))
        return self._history.current

    def update(self, f: Callable[[T], T]) -> T:
        """Commit f(current) as the present. Clears redo history.

        Returns:
            The new current value.
        """
        self._history = self._limit(self._history.evolve(f))
        return self._history.current

    def undo(self) -> bool:
        """Step back one value.

        Returns:
            True if the present changed, False if there was no past.
        """
        return self._navigate(self._history.back(), "undo")

    def redo(self) -> bool:
        """Step forward one value.

        Returns:
            True if the present changed, False if there was no future.
        """
        return self._navigate(self._history.forward(), "redo")

    def reset(self, value: T) -> None:
        """Drop all past and future values and start over from value."""
        self._history = History.new(value)

    def _navigate(self, moved: History[T], action: str) -> bool:
        if moved is self._history:
            if self._settings.log_boundary:
                logger.debug("%s ignored: nothing to navigate to", action)
            return False
        self._history = moved
        return True

    def _limit(self, history: History[T]) -> History[T]:
        max_past = self._settings.max_past
        if max_past is None:
            return history
        limited = history.limit_past(max_past)
        if limited is not history:
            logger.debug(
                "Trimmed %d past value(s) to max_past=%d",
                len(history.past) - len(limited.past),
                max_past,
            )
        return limited

    def __repr__(self) -> str:
        h = self._history
        return f"Timeline(current={h.current!r}, past={len(h.past)}, future={len(h.future)})"
