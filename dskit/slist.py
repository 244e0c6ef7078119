"""Singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class SListNode:
    """A node of a singly linked list."""

    val: Any
    next: Optional["SListNode"] = None


class SList:
    """A singly linked list addressed by its head node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[SListNode] = None
        tail: Optional[SListNode] = None
        for v in values:
            node = SListNode(v)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[SListNode]:
        cur = self.head
        while cur is not None:
            yield cur
            cur = cur.next

    def _prev_of(self, pos: SListNode) -> SListNode:
        for node in self._nodes():
            if node.next is pos:
                return node
        raise ValueError("node is not in this list")

    def push_back(self, x: Any) -> SListNode:
        """Append ``x`` and return its node."""
        node = SListNode(x)
        if self.head is None:
            self.head = node
        else:
            tail = self.head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        return node

    def push_front(self, x: Any) -> SListNode:
        """Prepend ``x`` and return its node."""
        self.head = SListNode(x, self.head)
        return self.head

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("pop from empty SList")
        if self.head.next is None:
            val = self.head.val
            self.head = None
            return val
        prev = self.head
        while prev.next is not None and prev.next.next is not None:
            prev = prev.next
        tail = prev.next
        prev.next = None
        return tail.val

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from empty SList")
        node = self.head
        self.head = node.next
        node.next = None
        return node.val

    def find(self, x: Any) -> Optional[SListNode]:
        """Return the first node holding ``x``, or None."""
        return next((n for n in self._nodes() if n.val == x), None)

    def insert_after(self, pos: SListNode, x: Any) -> SListNode:
        """Insert ``x`` right after ``pos`` and return the new node."""
        if pos is None:
            raise ValueError("position node is required")
        pos.next = SListNode(x, pos.next)
        return pos.next

    def erase_after(self, pos: SListNode) -> Any:
        """Remove the node after ``pos`` and return its value."""
        if pos is None or pos.next is None:
            raise ValueError("no node after the given position")
        removed = pos.next
        pos.next = removed.next
        removed.next = None
        return removed.val

    def insert(self, pos: SListNode, x: Any) -> SListNode:
        """Insert ``x`` before ``pos``, which must be a node of this list."""
        if self.head is None or pos is None:
            raise ValueError("node is not in this list")
        if pos is self.head:
            return self.push_front(x)
        prev = self._prev_of(pos)
        prev.next = SListNode(x, pos)
        return prev.next

    def erase(self, pos: SListNode) -> Any:
        """Remove ``pos``, which must be a node of this list, and return its value."""
        if self.head is None or pos is None:
            raise ValueError("node is not in this list")
        if pos is self.head:
            return self.pop_front()
        prev = self._prev_of(pos)
        prev.next = pos.next
        pos.next = None
        return pos.val

    def clear(self) -> None:
        """Remove every node."""
        self.head = None

    def __iter__(self) -> Iterator[Any]:
        return (n.val for n in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{v}->" for v in self) + "NULL"