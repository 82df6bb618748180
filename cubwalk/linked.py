"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One list cell holding ``content`` and a link to the next cell."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list built from :class:`Node` cells."""

    def __init__(self, contents=()) -> None:
        self.head: Node | None = None
        for content in contents:
            self.add_back(content)

    def add_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The final node, or None for an empty list."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def clear(self, delete: Callable[[Any], None] | None) -> None:
        """Pass every content to ``delete`` and empty the list.

        Without a ``delete`` callable the list is left untouched.
        """
        if delete is None:
            return
        while self.head is not None:
            node = self.head
            self.head = node.next
            delete(node.content)
            node.next = None

    def for_each(self, func: Callable[[Any], None] | None) -> None:
        """Call ``func`` on every content in order; None does nothing."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], None] | None = None,
    ) -> "LinkedList":
        """A new list of ``func(content)`` for every content.

        If ``func`` raises, the contents produced so far are passed to
        ``delete`` before the exception propagates.
        """
        if func is None:
            raise TypeError("map needs a function")
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"