"""Key/value store backed by a binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from peernet.bst import BinarySearchTree, str_compare
from peernet.linked_list import LinkedList


@dataclass
class Entry:
    """A key and its value."""

    key: Any
    value: Any


def compare_string_keys(entry_one: Entry, entry_two: Entry) -> int:
    """Order two entries by their string keys."""
    return str_compare(entry_one.key, entry_two.key)


class Dictionary:
    """A mapping whose entries live in a binary search tree.

    ``keys`` records every inserted key in insertion order.
    """

    def __init__(self, compare: Callable[[Entry, Entry], int] = compare_string_keys) -> None:
        self.binary_search_tree = BinarySearchTree(compare)
        self.keys = LinkedList()

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``; an existing key keeps its first value."""
        self.binary_search_tree.insert(Entry(key, value))
        self.keys.push_back(key)

    def search(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None."""
        found = self.binary_search_tree.search(Entry(key, None))
        return None if found is None else found.value