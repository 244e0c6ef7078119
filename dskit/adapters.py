"""Bracket matching, and queues and stacks built from one another."""

from __future__ import annotations

from typing import Any

from dskit.fifo import LinkedQueue
from dskit.stack import Stack

_PAIRS = {"(": ")", "[": "]", "{": "}"}


def is_valid(s: str) -> bool:
    """Whether every bracket in ``s`` is closed by its partner in the right order.

    Any character that is not an opening bracket is treated as a closing one.
    """
    stack = Stack()
    for c in s:
        if c in _PAIRS:
            stack.push(c)
            continue
        if stack.empty():
            return False
        if _PAIRS[stack.pop()] != c:
            return False
    return stack.empty()


class QueueFromStacks:
    """A FIFO queue made of a push stack and a pop stack."""

    def __init__(self) -> None:
        self._push_stack = Stack()
        self._pop_stack = Stack()

    def push(self, x: Any) -> None:
        """Add ``x`` at the back."""
        self._push_stack.push(x)

    def pop(self) -> Any:
        """Remove and return the front value."""
        front = self.peek()
        self._pop_stack.pop()
        return front

    def peek(self) -> Any:
        """Return the front value; IndexError if the queue is empty."""
        if self._pop_stack.empty():
            while not self._push_stack.empty():
                self._pop_stack.push(self._push_stack.pop())
        return self._pop_stack.top()

    def empty(self) -> bool:
        """Whether the queue holds no values."""
        return self._push_stack.empty() and self._pop_stack.empty()


class StackFromQueues:
    """A LIFO stack made of two queues, one of which is always empty."""

    def __init__(self) -> None:
        self._q1 = LinkedQueue()
        self._q2 = LinkedQueue()

    def _split(self) -> tuple[LinkedQueue, LinkedQueue]:
        """Return (empty queue, other queue)."""
        if not self._q1.empty():
            return self._q2, self._q1
        return self._q1, self._q2

    def push(self, x: Any) -> None:
        """Put ``x`` on top."""
        _, target = self._split()
        target.push(x)

    def pop(self) -> Any:
        """Remove and return the top value; IndexError if the stack is empty."""
        empty_q, full_q = self._split()
        while len(full_q) > 1:
            empty_q.push(full_q.pop())
        top = full_q.back()
        full_q.pop()
        return top

    def top(self) -> Any:
        """Return the top value; IndexError if the stack is empty."""
        _, full_q = self._split()
        return full_q.back()

    def empty(self) -> bool:
        """Whether the stack holds no values."""
        return self._q1.empty() and self._q2.empty()