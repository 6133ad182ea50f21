"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: a value and the node after it."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list that keeps its head, its tail and its size."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """Return the final node, or None for an empty list."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, passing each value to ``delete`` first when given."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None
        self._tail = None
        self._size = 0

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every value, front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> LinkedList:
        """Return a new list of ``f(value)`` for every value.

        If ``f`` raises, the values produced so far are passed to ``delete``
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result