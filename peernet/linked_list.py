"""Singly linked list holding arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

Compare = Callable[[Any, Any], int]


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list addressed by position."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes(self._head):
            yield node.data

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    @staticmethod
    def _nodes(start: Optional[_Node]) -> Iterator[_Node]:
        node = start
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def insert(self, index: int, data: Any) -> None:
        """Insert ``data`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._length:
            raise IndexError(f"insert index {index} out of range")
        if index == 0:
            self._head = _Node(data, self._head)
        else:
            before = self._node_at(index - 1)
            before.next = _Node(data, before.next)
        self._length += 1

    def remove(self, index: int) -> None:
        """Remove the value at position ``index``."""
        if not 0 <= index < self._length:
            raise IndexError(f"remove index {index} out of range")
        if index == 0:
            self._head = self._head.next
        else:
            before = self._node_at(index - 1)
            before.next = before.next.next
        self._length -= 1

    def retrieve(self, index: int) -> Any:
        """Return the value at ``index``, or None when there is none."""
        if not 0 <= index < self._length:
            return None
        return self._node_at(index).data

    def sort(self, compare: Compare) -> None:
        """Sort in place; ``compare(a, b)`` is positive when ``a`` belongs after ``b``."""
        for outer in self._nodes(self._head):
            for inner in self._nodes(outer.next):
                if compare(outer.data, inner.data) > 0:
                    outer.data, inner.data = inner.data, outer.data

    def search(self, query: Any, compare: Compare) -> bool:
        """Binary search a list already sorted by ``compare``."""
        low = 0
        high = self._length
        position = self._length // 2
        while high > low:
            order = compare(self.retrieve(position), query)
            if order > 0:
                high = position
                following = (low + position) // 2
            elif order < 0:
                low = position
                following = (high + position) // 2
            else:
                return True
            if following == position:
                break
            position = following
        return False

    def push_back(self, data: Any) -> None:
        """Append ``data`` at the end of the list."""
        self.insert(self._length, data)