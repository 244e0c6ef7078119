"""Last-in, first-out stack."""

from __future__ import annotations

from typing import Any


class Stack:
    """An array-backed LIFO stack."""

    def __init__(self) -> None:
        self._data: list[Any] = []

    def push(self, x: Any) -> None:
        """Put ``x`` on top."""
        self._data.append(x)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._data:
            raise IndexError("pop from empty stack")
        return self._data.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._data:
            raise IndexError("top of empty stack")
        return self._data[-1]

    def empty(self) -> bool:
        """Whether the stack holds no values."""
        return not self._data

    def clear(self) -> None:
        """Remove every value."""
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)