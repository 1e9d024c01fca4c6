"""First-in first-out queue built on the linked list."""

from __future__ import annotations

from typing import Any

from peernet.linked_list import LinkedList


class Queue:
    """A FIFO queue."""

    def __init__(self) -> None:
        self._list = LinkedList()

    def __len__(self) -> int:
        return len(self._list)

    def push(self, data: Any) -> None:
        """Add ``data`` at the back of the queue."""
        self._list.insert(len(self._list), data)

    def peek(self) -> Any:
        """Return the front value, or None when the queue is empty."""
        return self._list.retrieve(0)

    def pop(self) -> Any:
        """Remove and return the front value."""
        if not self._list:
            raise IndexError("pop from empty queue")
        front = self._list.retrieve(0)
        self._list.remove(0)
        return front