"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], object]]


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: Any) -> None:
        """Insert ``content`` as the new first element."""
        self._head = _Node(content, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def add_back(self, content: Any) -> None:
        """Append ``content`` as the new last element."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """The content of the last element, or None for an empty list."""
        return None if self._tail is None else self._tail.content

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first element, pass it to ``delete`` if given, and return it."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every element, passing each to ``delete`` in order if given."""
        while self._head is not None:
            self.pop_front(delete)

    def iterate(self, f: Callable[[Any], object]) -> None:
        """Call ``f`` on every element in order."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """A new list of ``f`` applied to each element.

        If ``f`` fails, the contents built so far are passed to ``delete`` and
        the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(f(content))
        except Exception:
            result.clear(delete)
            raise
        return result