"""An unbalanced binary search tree of distinct integers."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A binary search tree; duplicate values are ignored."""

    def __init__(self, root: int):
        self._root = _Node(root)

    def add(self, value: int) -> None:
        """Insert ``value`` unless it is already present."""
        node = self._root
        while True:
            if value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    return
                node = node.right
            elif value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    return
                node = node.left
            else:
                return

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if node.value > value else node.right
        return False

    def __iter__(self) -> Iterator[int]:
        """Yield the values in ascending order."""
        pending: list[_Node] = []
        node: _Node | None = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.value
            node = node.right


def random_tree(seed: int | None = None) -> BinarySearchTree:
    """Build a tree of a random root and up to 49 further random values below 100."""
    rng = random.Random(seed)
    tree = BinarySearchTree(rng.randrange(100))
    for _ in range(rng.randrange(50)):
        tree.add(rng.randrange(100))
    return tree