"""History model: an immutable zipper over past, present and future values.

Usage:
    h = History.new(0).to(1).to(2)   # current=2, past=[1, 0]
    h = h.back()                     # current=1, future=[2]
    h = h.to(99)                     # current=99, future discarded

Both stacks are most-recent-first: the top of `past` is the value just
before `current`, the top of `future` is the value `forward()` restores.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

from undoable.core.stack import Stack


@dataclass(frozen=True, slots=True)
class History[T]:
    """A present value plus the values visited before and after it.

    Immutable - each method returns a new History instance. Navigation
    at a boundary (back with no past, forward with no future) returns
    the instance itself.
    """

    current: T
    past: Stack[T] = field(default_factory=Stack)
    future: Stack[T] = field(default_factory=Stack)

    def __post_init__(self) -> None:
        # Accept plain iterables (most-recent-first) for past and future.
        if not isinstance(self.past, Stack):
            object.__setattr__(self, "past", Stack(self.past))
        if not isinstance(self.future, Stack):
            object.__setattr__(self, "future", Stack(self.future))

    @classmethod
    def new(cls, value: T) -> History[T]:
        """Start a history with a single present value."""
        return cls(current=value)

    @classmethod
    def from_list(cls, items: Iterable[T]) -> History[T] | None:
        """Build from items ordered most-recent-first.

        The first item becomes the present, the rest become the past in
        the order given.

        Args:
            items: Values, newest first. Consumed once.

        Returns:
            The History, or None if items is empty.
        """
        values = list(items)
        if not values:
            return None
        return cls(current=values[0], past=Stack(values[1:]))

    def back(self) -> History[T]:
        """Undo: make the previous value current."""
        if not self.past:
            return self
        previous, past = self.past.pop()
        return History(current=previous, past=past, future=self.future.push(self.current))

    def forward(self) -> History[T]:
        """Redo: make the next value current."""
        if not self.future:
            return self
        following, future = self.future.pop()
        return History(current=following, past=self.past.push(self.current), future=future)

    def to(self, value: T) -> History[T]:
        """Commit value as the new present, discarding any future."""
        return History(current=value, past=self.past.push(self.current))

    def evolve(self, f: Callable[[T], T]) -> History[T]:
        """Commit f(current) as the new present, discarding any future."""
        return self.to(f(self.current))

    def map[U](self, f: Callable[[T], U]) -> History[U]:
        """Apply f to every recorded value, keeping the focus position."""
        return History(current=f(self.current), past=self.past.map(f), future=self.future.map(f))

    def can_back(self) -> bool:
        return bool(self.past)

    def can_forward(self) -> bool:
        return bool(self.future)

    def limit_past(self, n: int) -> History[T]:
        """Keep only the n most recent past values.

        Raises:
            ValueError: If n is negative.
        """
        past = self.past.take(n)
        if past is self.past:
            return self
        return History(current=self.current, past=past, future=self.future)

    def __len__(self) -> int:
        return len(self.past) + 1 + len(self.future)

    def __iter__(self) -> Iterator[T]:
        """Iterate chronologically: oldest past value to newest future value."""
        yield from reversed(tuple(self.past))
        yield self.current
        yield from self.future
