"""Singly linked lists: building, sorting, deleting, merging and rotating."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def build_list(values: Iterable[Any]) -> Optional[ListNode]:
    """Link ``values`` into a list and return its head, or None when empty."""
    dummy = ListNode(None)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def iter_values(head: Optional[ListNode]) -> Iterator[Any]:
    """Yield the values of the list starting at ``head``."""
    node = head
    while node is not None:
        yield node.val
        node = node.next


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Stably sort the list by relinking its nodes; return the new head."""
    dummy = ListNode(None)
    node = head
    while node is not None:
        following = node.next
        slot = dummy
        while slot.next is not None and slot.next.val <= node.val:
            slot = slot.next
        node.next = slot.next
        slot.next = node
        node = following
    return dummy.next


def delete_key(head: Optional[ListNode], key: Any) -> Optional[ListNode]:
    """Unlink the first node holding ``key`` and return the list's head."""
    dummy = ListNode(None, head)
    prev = dummy
    while prev.next is not None:
        if prev.next.val == key:
            prev.next = prev.next.next
            break
        prev = prev.next
    return dummy.next


def merge_sorted(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two ascending lists by relinking their nodes.

    On equal values the node from ``first`` comes first.
    """
    dummy = ListNode(None)
    tail = dummy
    while first is not None and second is not None:
        if first.val > second.val:
            tail.next, second = second, second.next
        else:
            tail.next, first = first, first.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list ``k`` places to the right and return the new head.

    ``k`` is taken modulo the list's length, so a negative ``k`` rotates left.
    """
    if head is None:
        return None
    count = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        count += 1
    k %= count
    if k == 0:
        return head
    new_tail = head
    for _ in range(count - k - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    tail.next = head
    return new_head