"""Singly linked lists, multilevel list flattening, reversal and pair swapping."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: ListNode | None = None


class LinkedList:
    """A singly linked list with insertion and deletion at either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = from_values(values)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> ListNode:
        if position >= 0:
            for index, node in enumerate(self._nodes()):
                if index == position:
                    return node
        raise IndexError(f"no node at position {position}")

    def insert_at_beginning(self, data: Any) -> None:
        """Put ``data`` in front of the first node."""
        self.head = ListNode(data, self.head)

    def insert_at_end(self, data: Any) -> None:
        """Append ``data`` after the last node."""
        node = ListNode(data)
        if self.head is None:
            self.head = node
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node

    def insert_after(self, position: int, data: Any) -> None:
        """Insert ``data`` right after the node at the 0-based ``position``."""
        node = self._node_at(position)
        node.next = ListNode(data, node.next)

    def delete_at_beginning(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        removed = self.head
        self.head = removed.next
        return removed.val

    def delete_at_end(self) -> Any:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        if self.head.next is None:
            removed = self.head
            self.head = None
            return removed.val
        node = self.head
        while node.next is not None and node.next.next is not None:
            node = node.next
        removed = node.next
        node.next = None
        return removed.val

    def delete(self, key: Any) -> bool:
        """Remove the first node holding ``key``; tell whether one was found."""
        previous: ListNode | None = None
        for node in self._nodes():
            if node.val == key:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return True
            previous = node
        return False

    def __contains__(self, key: object) -> bool:
        return any(node.val == key for node in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.val for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "[" + "".join(f" {value} " for value in self) + "]"


@dataclass(eq=False)
class MultilevelNode:
    """A doubly linked node that may also point at a child list."""

    val: Any = 0
    next: MultilevelNode | None = None
    prev: MultilevelNode | None = None
    child: MultilevelNode | None = None


def flatten(head: MultilevelNode | None) -> MultilevelNode | None:
    """Append every child list to the end of the top level, in place; return the head."""
    if head is None:
        return None
    tail = head
    while tail.next is not None:
        tail = tail.next
    node: MultilevelNode | None = head
    while node is not None:
        if node.child is not None:
            child = node.child
            tail.next = child
            child.prev = tail
            while tail.next is not None:
                tail = tail.next
            node.child = None
        node = node.next
    return head


def from_values(values: Iterable[Any]) -> ListNode | None:
    """Build a chain of :class:`ListNode` from the values; None when there are none."""
    sentinel = ListNode()
    last = sentinel
    for value in values:
        last.next = ListNode(value)
        last = last.next
    return sentinel.next


def to_values(head: Any) -> list[Any]:
    """Collect the values along the ``next`` links starting at ``head``."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the chain in place and return its new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes in place and return the new head."""
    if head is None or head.next is None:
        return head
    sentinel = ListNode(0, head)
    previous = sentinel
    current = head
    while current is not None and current.next is not None:
        first, second = current, current.next
        previous.next = second
        first.next = second.next
        second.next = first
        current = first.next
        previous = first
    return sentinel.next