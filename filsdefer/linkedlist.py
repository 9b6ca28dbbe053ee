"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items or ():
            self.add_back(item)

    @property
    def head(self) -> Node | None:
        """The first node, or None for an empty list."""
        return self._head

    def add_front(self, content: Any) -> Node:
        """Insert ``content`` at the start and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """The last node, or None for an empty list."""
        return self._tail

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, passing each content to ``delete`` in order."""
        node = self._head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self._head = self._tail = None
        self._size = 0

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every content, front to back."""
        if not callable(f):
            raise TypeError("f must be callable")
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> "LinkedList":
        """Return a new list of ``f(content)`` for every content.

        If ``f`` raises, the contents already produced are passed to
        ``delete`` and the error propagates.
        """
        if not callable(f):
            raise TypeError("f must be callable")
        result = LinkedList()
        try:
            for content in self:
                result.add_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"