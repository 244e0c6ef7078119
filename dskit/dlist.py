"""Circular doubly linked list with a sentinel head."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class DListNode:
    """A node of a doubly linked list."""

    __slots__ = ("val", "prev", "next")

    def __init__(self, val: Any) -> None:
        self.val = val
        self.prev: Optional[DListNode] = None
        self.next: Optional[DListNode] = None

    def __repr__(self) -> str:
        return f"DListNode({self.val!r})"


class DList:
    """A circular doubly linked list built around a sentinel node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.sentinel = DListNode(-1)
        self.sentinel.prev = self.sentinel
        self.sentinel.next = self.sentinel
        for v in values:
            self.push_back(v)

    def _nodes(self) -> Iterator[DListNode]:
        cur = self.sentinel.next
        while cur is not self.sentinel:
            yield cur
            cur = cur.next

    def push_back(self, x: Any) -> DListNode:
        """Append ``x`` and return its node."""
        return self.insert(self.sentinel, x)

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self.sentinel.next is self.sentinel:
            raise IndexError("pop from empty DList")
        return self.erase(self.sentinel.prev)

    def push_front(self, x: Any) -> DListNode:
        """Prepend ``x`` and return its node."""
        return self.insert(self.sentinel.next, x)

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self.sentinel.next is self.sentinel:
            raise IndexError("pop from empty DList")
        return self.erase(self.sentinel.next)

    def find(self, x: Any) -> Optional[DListNode]:
        """Return the first node holding ``x``, or None."""
        return next((n for n in self._nodes() if n.val == x), None)

    def insert(self, pos: DListNode, x: Any) -> DListNode:
        """Insert ``x`` before ``pos`` and return the new node."""
        if pos is None or pos.prev is None:
            raise ValueError("position is not a linked node")
        node = DListNode(x)
        before = pos.prev
        node.next = pos
        pos.prev = node
        node.prev = before
        before.next = node
        return node

    def erase(self, pos: DListNode) -> Any:
        """Unlink ``pos`` and return its value."""
        if pos is None or pos.prev is None:
            raise ValueError("position is not a linked node")
        if pos is self.sentinel:
            raise ValueError("cannot erase the sentinel")
        pos.next.prev = pos.prev
        pos.prev.next = pos.next
        pos.prev = pos.next = None
        return pos.val

    def clear(self) -> None:
        """Remove every node, keeping the sentinel."""
        for node in list(self._nodes()):
            node.prev = node.next = None
        self.sentinel.prev = self.sentinel
        self.sentinel.next = self.sentinel

    def __iter__(self) -> Iterator[Any]:
        return (n.val for n in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        cur = self.sentinel.prev
        while cur is not self.sentinel:
            yield cur.val
            cur = cur.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "sentinel<=>" + "".join(f"{v}<=>" for v in self)