"""The two stacks of the puzzle and the operations that move numbers between them."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Optional


class Stack:
    """A stack of integers whose first element is its top."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def top(self) -> int:
        """Return the top element; raise IndexError when the stack is empty."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[0]

    def swap(self) -> None:
        """Exchange the two top elements; no effect with fewer than two."""
        if len(self._items) >= 2:
            first = self._items.popleft()
            second = self._items.popleft()
            self._items.appendleft(first)
            self._items.appendleft(second)

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        if len(self._items) >= 2:
            self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        if len(self._items) >= 2:
            self._items.rotate(1)

    def push_from(self, other: Stack) -> None:
        """Take the top of ``other`` and put it on top of this stack."""
        if other._items:
            self._items.appendleft(other._items.popleft())

    def is_sorted(self) -> bool:
        """True when the values ascend from top to bottom."""
        items = self._items
        return all(a <= b for a, b in zip(items, list(items)[1:]))

    def index_of(self, number: int) -> int:
        """Return the distance of ``number`` from the top; ValueError if absent."""
        try:
            return self._items.index(number)
        except ValueError:
            raise ValueError(f"{number} is not in the stack") from None


def ss(a: Optional[Stack], b: Optional[Stack]) -> None:
    """Swap the tops of both stacks."""
    for stack in (a, b):
        if stack is not None:
            stack.swap()


def rr(a: Optional[Stack], b: Optional[Stack]) -> None:
    """Rotate both stacks."""
    for stack in (a, b):
        if stack is not None:
            stack.rotate()


def rrr(a: Optional[Stack], b: Optional[Stack]) -> None:
    """Reverse-rotate both stacks."""
    for stack in (a, b):
        if stack is not None:
            stack.reverse_rotate()


def format_stack(stack: Iterable[int]) -> str:
    """Render the values top first, each followed by a space, then a newline."""
    return "".join(f"{value} " for value in stack) + "\n"