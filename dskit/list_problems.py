"""Exercises on singly linked lists: two pointers, reversal, cycles and copying."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any
    next: Optional["ListNode"] = None


@dataclass(eq=False)
class RandomNode:
    """A list node that also points at an arbitrary node of the same list."""

    val: Any
    next: Optional["RandomNode"] = None
    random: Optional["RandomNode"] = None


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order and return its head."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for v in values:
        node = ListNode(v)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def _nodes(head: Optional[Any]) -> Iterator[Any]:
    cur = head
    while cur is not None:
        yield cur
        cur = cur.next


def to_values(head: Optional[Any]) -> list[Any]:
    """Values of the list starting at ``head``; the list must not be cyclic."""
    return [node.val for node in _nodes(head)]


def kth_to_last(head: Optional[ListNode], k: int) -> Any:
    """Value of the ``k``-th node from the end (``k`` = 1 is the last node).

    Raises ValueError if ``k`` is not positive and IndexError if the list is
    shorter than ``k``.
    """
    if k < 1:
        raise ValueError("k must be positive")
    slow = fast = head
    for _ in range(k):
        if fast is None:
            raise IndexError("k is larger than the list length")
        fast = fast.next
    while fast is not None:
        slow = slow.next
        fast = fast.next
    return slow.val


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """The middle node; with an even count, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def remove_elements(head: Optional[ListNode], val: Any) -> Optional[ListNode]:
    """Unlink every node holding ``val`` and return the new head."""
    new_head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    cur = head
    while cur is not None:
        nxt = cur.next
        if cur.val != val:
            if tail is None:
                new_head = cur
            else:
                tail.next = cur
            tail = cur
        else:
            cur.next = None
        cur = nxt
    if tail is not None:
        tail.next = None
    return new_head


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    new_head: Optional[ListNode] = None
    cur = head
    while cur is not None:
        nxt = cur.next
        cur.next = new_head
        new_head = cur
        cur = nxt
    return new_head


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Whether the values read the same forwards and backwards.

    The second half is reversed for the comparison and restored afterwards.
    """
    mid = middle_node(head)
    rhead = reverse_list(mid)
    result = True
    left, right = head, rhead
    while right is not None:
        if left.val != right.val:
            result = False
            break
        left = left.next
        right = right.next
    reverse_list(rhead)
    return result


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Deep copy of a list whose nodes also carry a ``random`` pointer."""
    copies = {id(node): RandomNode(node.val) for node in _nodes(head)}
    for node in _nodes(head):
        copy = copies[id(node)]
        copy.next = None if node.next is None else copies[id(node.next)]
        copy.random = None if node.random is None else copies[id(node.random)]
    return None if head is None else copies[id(head)]


def has_cycle(head: Optional[ListNode]) -> bool:
    """Whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """The node where the cycle begins, or None if the list has no cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            meet = head
            while meet is not slow:
                meet = meet.next
                slow = slow.next
            return meet
    return None


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """The first node shared by both lists, or None if they never join."""
    if head_a is None or head_b is None:
        return None
    len_a = len_b = 1
    tail_a, tail_b = head_a, head_b
    while tail_a.next is not None:
        len_a += 1
        tail_a = tail_a.next
    while tail_b.next is not None:
        len_b += 1
        tail_b = tail_b.next
    if tail_a is not tail_b:
        return None
    long_list, short_list = (head_a, head_b) if len_a >= len_b else (head_b, head_a)
    for _ in range(abs(len_a - len_b)):
        long_list = long_list.next
    while long_list is not short_list:
        long_list = long_list.next
        short_list = short_list.next
    return long_list


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; on ties ``list2`` goes first."""
    if list1 is None:
        return list2
    if list2 is None:
        return list1
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    cur1, cur2 = list1, list2
    while cur1 is not None and cur2 is not None:
        if cur1.val < cur2.val:
            node, cur1 = cur1, cur1.next
        else:
            node, cur2 = cur2, cur2.next
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    tail.next = cur1 if cur1 is not None else cur2
    return head


def partition(head: Optional[ListNode], x: Any) -> Optional[ListNode]:
    """Move nodes less than ``x`` before the rest, keeping each group's order."""
    less_dummy = ListNode(None)
    rest_dummy = ListNode(None)
    less_tail, rest_tail = less_dummy, rest_dummy
    cur = head
    while cur is not None:
        if cur.val < x:
            less_tail.next = cur
            less_tail = cur
        else:
            rest_tail.next = cur
            rest_tail = cur
        cur = cur.next
    less_tail.next = rest_dummy.next
    rest_tail.next = None
    return less_dummy.next