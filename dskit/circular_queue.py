"""Fixed-capacity ring buffer queue."""

from __future__ import annotations


class CircularQueue:
    """A ring buffer of capacity ``k`` that keeps one slot free.

    Operations report success with a bool; ``front`` and ``rear`` give -1
    when the queue is empty.
    """

    def __init__(self, k: int) -> None:
        if k < 0:
            raise ValueError("capacity must not be negative")
        self._k = k
        self._data = [0] * (k + 1)
        self._front = 0
        self._back = 0

    def is_empty(self) -> bool:
        return self._front == self._back

    def is_full(self) -> bool:
        return (self._back + 1) % (self._k + 1) == self._front

    def enqueue(self, value: int) -> bool:
        """Add ``value`` at the rear; False if the queue is full."""
        if self.is_full():
            return False
        self._data[self._back] = value
        self._back = (self._back + 1) % (self._k + 1)
        return True

    def dequeue(self) -> bool:
        """Drop the front value; False if the queue is empty."""
        if self.is_empty():
            return False
        self._front = (self._front + 1) % (self._k + 1)
        return True

    def front(self) -> int:
        """The front value, or -1 when empty."""
        if self.is_empty():
            return -1
        return self._data[self._front]

    def rear(self) -> int:
        """The rear value, or -1 when empty."""
        if self.is_empty():
            return -1
        return self._data[(self._back - 1) % (self._k + 1)]