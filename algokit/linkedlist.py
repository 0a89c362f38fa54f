"""Linked lists: a doubly linked list with positional edits and a singly linked stack of nodes."""

from __future__ import annotations

from typing import Iterable, Iterator


class _DNode:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: int, prev: _DNode | None = None, next_: _DNode | None = None):
        self.data = data
        self.prev = prev
        self.next = next_


class DoublyLinkedList:
    """A doubly linked list behind a header node.

    Positions are counted from 1, the header standing at position 0.
    """

    def __init__(self, values: Iterable[int] = ()):
        self._header = _DNode(0)
        self._tail = self._header
        self._size = 0
        for value in values:
            self.insert_last(value)

    def _nodes(self) -> Iterator[_DNode]:
        node = self._header.next
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def _unlink(self, node: _DNode) -> int:
        node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.data

    def _link_after(self, anchor: _DNode, data: int) -> None:
        node = _DNode(data, anchor, anchor.next)
        if anchor.next is not None:
            anchor.next.prev = node
        else:
            self._tail = node
        anchor.next = node
        self._size += 1

    def delete_first(self) -> int:
        """Remove and return the first element."""
        if not self._size:
            raise IndexError("delete from an empty list")
        return self._unlink(self._header.next)

    def delete_last(self) -> int:
        """Remove and return the last element."""
        if not self._size:
            raise IndexError("delete from an empty list")
        return self._unlink(self._tail)

    def delete(self, key: int) -> None:
        """Remove the first element equal to ``key``."""
        for node in self._nodes():
            if node.data == key:
                self._unlink(node)
                return
        raise ValueError(f"element {key} not present in the list")

    def insert_first(self, data: int) -> None:
        """Put ``data`` at the front."""
        self._link_after(self._header, data)

    def insert_last(self, data: int) -> None:
        """Put ``data`` at the end."""
        self._link_after(self._tail, data)

    def insert(self, pos: int, data: int) -> None:
        """Insert ``data`` so that it takes position ``pos`` (1 to the current length)."""
        if not 1 <= pos <= self._size:
            raise IndexError(f"invalid position {pos}")
        for position, node in enumerate(self._nodes(), start=1):
            if position == pos:
                self._link_after(node.prev, data)
                return


class _SNode:
    __slots__ = ("data", "next")

    def __init__(self, data: int, next_: _SNode | None):
        self.data = data
        self.next = next_


class SinglyLinkedList:
    """A singly linked list that grows at the front."""

    def __init__(self) -> None:
        self._head: _SNode | None = None
        self._size = 0

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def push_front(self, item: int) -> None:
        """Insert ``item`` before the current first node."""
        self._head = _SNode(item, self._head)
        self._size += 1