"""Unbalanced binary search tree ordered by a comparison function."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

Compare = Callable[[Any, Any], int]


@dataclass
class _TreeNode:
    data: Any
    lesser: Optional["_TreeNode"] = None
    greater: Optional["_TreeNode"] = None


def str_compare(data_one: str, data_two: str) -> int:
    """Return 1, -1 or 0 as ``data_one`` sorts after, before or equal to ``data_two``."""
    return (data_one > data_two) - (data_one < data_two)


class BinarySearchTree:
    """A binary search tree; values that compare equal are stored once."""

    def __init__(self, compare: Compare) -> None:
        self.compare = compare
        self._root: Optional[_TreeNode] = None

    def _locate(self, data: Any) -> Tuple[_TreeNode, int]:
        node = self._root
        while True:
            order = self.compare(node.data, data)
            if order > 0:
                if node.lesser is None:
                    return node, 1
                node = node.lesser
            elif order < 0:
                if node.greater is None:
                    return node, -1
                node = node.greater
            else:
                return node, 0

    def insert(self, data: Any) -> None:
        """Add ``data`` unless an equal value is already present."""
        if self._root is None:
            self._root = _TreeNode(data)
            return
        node, direction = self._locate(data)
        if direction > 0:
            node.lesser = _TreeNode(data)
        elif direction < 0:
            node.greater = _TreeNode(data)

    def search(self, data: Any) -> Any:
        """Return the stored value equal to ``data``, or None."""
        if self._root is None:
            return None
        node, direction = self._locate(data)
        return node.data if direction == 0 else None