"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Optional[Callable[[Any], object]]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def pop_front(self, delete: Deleter) -> Any:
        """Unlink the first node, pass its content to ``delete`` and return the content.

        Without a ``delete`` callable, or on an empty list, nothing happens and
        None is returned.
        """
        if delete is None or self.head is None:
            return None
        node = self.head
        self.head = node.next
        node.next = None
        delete(node.content)
        return node.content

    def clear(self, delete: Deleter) -> None:
        """Remove every node, passing each content to ``delete`` in order.

        Without a ``delete`` callable the list is left untouched.
        """
        if delete is None:
            return
        while self.head is not None:
            self.pop_front(delete)

    def iterate(self, f: Optional[Callable[[Any], object]]) -> None:
        """Call ``f`` on each content in order."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(self, f: Optional[Callable[[Any], Any]], delete: Deleter) -> "LinkedList":
        """Return a new list holding ``f(content)`` for each content.

        If ``f`` raises, the contents built so far are passed to ``delete``
        and the exception propagates.
        """
        result = LinkedList()
        if f is None:
            return result
        try:
            for content in self:
                result.push_back(f(content))
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