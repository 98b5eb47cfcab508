"""Singly linked lists and the classic algorithms that operate on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list.

    Nodes compare by identity, so lists that contain cycles can be handled safely.
    """

    val: int = 0
    next: Optional["ListNode"] = field(default=None)

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"

    def __iter__(self) -> Iterator["ListNode"]:
        """Yield this node and every node after it, stopping if a node repeats."""
        seen: set[int] = set()
        node: Optional[ListNode] = self
        while node is not None and id(node) not in seen:
            seen.add(id(node))
            yield node
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list from ``values`` and return its head, or None if empty."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``.

    Raises ValueError if the list contains a cycle.
    """
    values: list[int] = []
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("linked list contains a cycle")
        seen.add(id(node))
        values.append(node.val)
        node = node.next
    return values


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers whose digits are stored least significant first.

    A new list holding the digits of the sum, least significant first, is returned.
    """
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists by splicing their nodes together.

    Equal values keep nodes from ``list1`` first.
    """
    if list1 is None:
        return list2
    if list2 is None:
        return list1

    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Return True if following ``next`` from ``head`` never reaches the end."""
    if head is None or head.next is None:
        return False
    slow: Optional[ListNode] = head
    fast: Optional[ListNode] = head.next
    while slow is not fast:
        if fast is None or fast.next is None:
            return False
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return True


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a cycle begins, or None if the list ends."""
    if head is None or head.next is None:
        return None
    slow: Optional[ListNode] = head
    fast: Optional[ListNode] = head
    while True:
        if fast is None or fast.next is None:
            return None
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            break

    slow = head
    while slow is not fast:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next  # type: ignore[union-attr]
    return slow


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder L0, L1, ..., Ln into L0, Ln, L1, Ln-1, ... in place."""
    if head is None or head.next is None or head.next.next is None:
        return

    slow = head
    fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next

    # Detach and reverse the second half.
    second = slow.next
    slow.next = None
    previous: Optional[ListNode] = None
    while second is not None:
        second.next, previous, second = previous, second, second.next

    first: Optional[ListNode] = head
    while previous is not None and first is not None:
        following_first = first.next
        following_second = previous.next
        first.next = previous
        previous.next = following_first
        first = following_first
        previous = following_second


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the order of the values in the list, keeping its nodes in place.

    The original head node is returned and now holds the former last value.
    """
    if head is None:
        return None
    nodes = list(head)
    for node, value in zip(nodes, reversed([node.val for node in nodes])):
        node.val = value
    return head