"""First-in, first-out queue on singly linked nodes."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class _Node:
    __slots__ = ("val", "next")

    def __init__(self, val: Any) -> None:
        self.val = val
        self.next: Optional[_Node] = None


class LinkedQueue:
    """A FIFO queue holding head and tail nodes and a size count."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def push(self, x: Any) -> None:
        """Add ``x`` at the back."""
        node = _Node(x)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the front value."""
        if self._head is None:
            raise IndexError("pop from empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.val

    def front(self) -> Any:
        """Return the front value."""
        if self._head is None:
            raise IndexError("front of empty queue")
        return self._head.val

    def back(self) -> Any:
        """Return the back value."""
        if self._tail is None:
            raise IndexError("back of empty queue")
        return self._tail.val

    def empty(self) -> bool:
        """Whether the queue holds no values."""
        return self._size == 0

    def clear(self) -> None:
        """Remove every value."""
        self._head = self._tail = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        cur = self._head
        while cur is not None:
            yield cur.val
            cur = cur.next