"""Sequence list: a contiguous, growable array of values."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class SeqList:
    """An array-backed list with positional insert and erase."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._data: list[Any] = list(values)

    def push_back(self, x: Any) -> None:
        """Append ``x`` at the end."""
        self._data.append(x)

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if not self._data:
            raise IndexError("pop from empty SeqList")
        return self._data.pop()

    def push_front(self, x: Any) -> None:
        """Insert ``x`` before the first value."""
        self._data.insert(0, x)

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if not self._data:
            raise IndexError("pop from empty SeqList")
        return self._data.pop(0)

    def find(self, x: Any) -> int:
        """Return the index of the first value equal to ``x``, or -1."""
        return next((i for i, v in enumerate(self._data) if v == x), -1)

    def insert(self, pos: int, x: Any) -> None:
        """Insert ``x`` so that it ends up at index ``pos`` (0 <= pos <= len)."""
        if not 0 <= pos <= len(self._data):
            raise IndexError(f"insert position {pos} out of range")
        self._data.insert(pos, x)

    def erase(self, pos: int) -> Any:
        """Remove and return the value at index ``pos`` (0 <= pos < len)."""
        if not 0 <= pos < len(self._data):
            raise IndexError(f"erase position {pos} out of range")
        return self._data.pop(pos)

    def clear(self) -> None:
        """Remove every value."""
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def __str__(self) -> str:
        return " ".join(str(v) for v in self._data)

    def __repr__(self) -> str:
        return f"SeqList({self._data!r})"