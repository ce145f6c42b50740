"""Pure functions over History values.

Function-style counterparts of the History methods, taking the history
last so they read well in pipelines and partial application:

    h = to(2, to(1, new(0)))
    assert current(back(h)) == 1
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from undoable.core.history.models import History

T = TypeVar("T")
U = TypeVar("U")


def new(value: T) -> History[T]:
    """Create a history holding only value.

    Args:
        value: The initial present value.

    Returns:
        History with empty past and future.
    """
    return History.new(value)


def from_list(items: Iterable[T]) -> History[T] | None:
    """Create a history from values ordered newest first.

    Args:
        items: First item becomes current, the rest become the past.

    Returns:
        The History, or None if items is empty.
    """
    return History.from_list(items)


def current(history: History[T]) -> T:
    """Return the present value."""
    return history.current


def back(history: History[T]) -> History[T]:
    """Undo one step.

    Args:
        history: History to navigate.

    Returns:
        History focused on the previous value, or history itself if
        there is no past.
    """
    return history.back()


def forward(history: History[T]) -> History[T]:
    """Redo one step.

    Args:
        history: History to navigate.

    Returns:
        History focused on the next value, or history itself if there
        is no future.
    """
    return history.forward()


def to(value: T, history: History[T]) -> History[T]:
    """Make value the present, pushing the old present onto the past.

    The future is always discarded.
    """
    return history.to(value)


def evolve(f: Callable[[T], T], history: History[T]) -> History[T]:
    """Equivalent to to(f(current(history)), history)."""
    return history.evolve(f)


def map_history(f: Callable[[T], U], history: History[T]) -> History[U]:
    """Apply f to every value in the history, preserving its shape.

    Args:
        f: Transformation applied to past, current and future values.
        history: Source history.

    Returns:
        History over the transformed values with the same focus position.
    """
    return history.map(f)
