"""Singly linked lists: copying, cycle detection and digit-wise addition."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> ListNode | None:
        """Build a list holding values in order; an empty input gives None."""
        head: ListNode | None = None
        tail: ListNode | None = None
        for value in values:
            node = cls(value)
            if tail is None:
                head = node
            else:
                tail.next = node
            tail = node
        return head

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


@dataclass(eq=False, repr=False)
class RandomNode:
    """A list node that also points at an arbitrary node of the same list."""

    val: int
    next: RandomNode | None = None
    random: RandomNode | None = None

    def __repr__(self) -> str:
        return f"RandomNode({self.val!r})"


def copy_random_list(head: RandomNode | None) -> RandomNode | None:
    """Return a deep copy of a list whose nodes carry random pointers."""
    copies: dict[RandomNode, RandomNode] = {}
    node = head
    while node is not None:
        copies[node] = RandomNode(node.val)
        node = node.next
    for original, copy in copies.items():
        copy.next = copies[original.next] if original.next is not None else None
        copy.random = copies[original.random] if original.random is not None else None
    return copies[head] if head is not None else None


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following next pointers from head ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if fast is slow:
            return True
    return False


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as lists of decimal digits, least significant first."""
    digits: list[int] = []
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
        digits.append(digit)
    return ListNode.from_values(digits)