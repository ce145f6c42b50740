"""Persistent stack model.

Usage:
    stack = Stack.of(3, 2, 1)  # top-first
    top, rest = stack.pop()    # 3, Stack.of(2, 1)
    bigger = rest.push(9)      # rest is untouched
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class _Node[T]:
    head: T
    tail: _Node[T] | None


class Stack[T]:
    """Immutable singly linked LIFO stack with structural sharing.

    push/pop/peek/len are O(1). Every operation returns a new Stack and
    leaves the receiver valid, so older snapshots can be kept freely.
    """

    __slots__ = ("_top", "_size")

    _top: _Node[T] | None
    _size: int

    def __init__(self, items: Iterable[T] = ()):
        top: _Node[T] | None = None
        size = 0
        for item in reversed(list(items)):
            top = _Node(item, top)
            size += 1
        object.__setattr__(self, "_top", top)
        object.__setattr__(self, "_size", size)

    @classmethod
    def of(cls, *items: T) -> Stack[T]:
        """Build a stack from items given top-first."""
        return cls(items)

    @classmethod
    def _from_node(cls, top: _Node[T] | None, size: int) -> Stack[T]:
        new = cls.__new__(cls)
        object.__setattr__(new, "_top", top)
        object.__setattr__(new, "_size", size)
        return new

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Stack[T]], tuple[tuple[T, ...]]]:
        # Rebuild from the flat item tuple; slot state cannot be set on an immutable Stack.
        return (Stack, (tuple(self),))

    def __copy__(self) -> Stack[T]:
        return self

    def push(self, value: T) -> Stack[T]:
        """Return a new stack with value on top."""
        return Stack._from_node(_Node(value, self._top), self._size + 1)

    def pop(self) -> tuple[T, Stack[T]]:
        """Split into (top value, remaining stack).

        Raises:
            IndexError: If the stack is empty.
        """
        if self._top is None:
            raise IndexError("pop from empty Stack")
        return self._top.head, Stack._from_node(self._top.tail, self._size - 1)

    def peek(self) -> T:
        """Top value without removing it.

        Raises:
            IndexError: If the stack is empty.
        """
        if self._top is None:
            raise IndexError("peek at empty Stack")
        return self._top.head

    def is_empty(self) -> bool:
        return self._top is None

    def map[U](self, f: Callable[[T], U]) -> Stack[U]:
        """Apply f to every element, preserving order."""
        return Stack(f(item) for item in self)

    def take(self, n: int) -> Stack[T]:
        """Keep the top n elements.

        Returns self when nothing would be dropped.

        Raises:
            ValueError: If n is negative.
        """
        if n < 0:
            raise ValueError(f"take() needs n >= 0, got {n}")
        if n >= self._size:
            return self
        items = []
        node = self._top
        while node is not None and len(items) < n:
            items.append(node.head)
            node = node.tail
        return Stack(items)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._top is not None

    def __iter__(self) -> Iterator[T]:
        """Iterate top-first."""
        node = self._top
        while node is not None:
            yield node.head
            node = node.tail

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        if self._size != other._size:
            return False
        a, b = self._top, other._top
        while a is not None and b is not None:
            if a is b:
                return True  # shared tail
            if a.head != b.head:
                return False
            a, b = a.tail, b.tail
        return True

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"Stack.of({', '.join(repr(item) for item in self)})"
