"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


def _require_callable(name: str, f: object) -> None:
    if not callable(f):
        raise TypeError(f"{name} must be callable")


class LinkedList:
    """Singly linked list; iteration yields the contents from front to back."""

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
        self.head = Node(content, self.head)
        return self.head

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the back and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The last node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def remove_first(self, delete: Callable[[Any], Any]) -> None:
        """Unlink the first node and pass its content to ``delete``."""
        _require_callable("delete", delete)
        if self.head is None:
            raise IndexError("remove_first from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        delete(node.content)

    def clear(self, delete: Callable[[Any], Any]) -> None:
        """Pass every content to ``delete`` in order and empty the list."""
        _require_callable("delete", delete)
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            delete(node.content)
            node.next = None
            node = following

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every content in order."""
        _require_callable("f", f)
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list of ``f(content)`` for every content.

        If ``f`` fails part way, the results made so far are passed to
        ``delete`` and the error propagates.
        """
        _require_callable("f", f)
        _require_callable("delete", delete)
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result