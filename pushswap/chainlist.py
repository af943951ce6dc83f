"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link holding ``content`` and the following node."""

    content: Any
    next: Node | None = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the contents of this node and every node after it."""
        node: Node | None = self
        while node is not None:
            yield node.content
            node = node.next


def _nodes(head: Node | None) -> Iterator[Node]:
    while head is not None:
        following = head.next
        yield head
        head = following


def size(head: Node | None) -> int:
    """Number of nodes from ``head`` on."""
    return sum(1 for _ in _nodes(head))


def last(head: Node | None) -> Node | None:
    """The final node, or ``None`` for an empty list."""
    tail = None
    for tail in _nodes(head):
        pass
    return tail


def add_front(head: Node | None, node: Node) -> Node:
    """Put ``node`` before ``head``; return the new head."""
    node.next = head
    return node


def add_back(head: Node | None, node: Node | None) -> Node | None:
    """Append ``node`` after the last node; return the head."""
    if node is None:
        return head
    tail = last(head)
    if tail is None:
        return add_front(head, node)
    tail.next = node
    return head


def for_each(head: Node | None, func: Callable[[Any], object]) -> None:
    """Call ``func`` on every content in order."""
    for node in _nodes(head):
        func(node.content)


def map_list(head: Node | None, func: Callable[[Any], Any] | None) -> Node | None:
    """A new list holding ``func`` applied to each content."""
    if head is None or func is None:
        return None
    new_head = Node(func(head.content))
    tail = new_head
    for node in _nodes(head.next):
        tail.next = Node(func(node.content))
        tail = tail.next
    return new_head


def clear(head: Node | None, delete: Callable[[Any], object]) -> None:
    """Call ``delete`` on every content and unlink all nodes; returns ``None``."""
    for node in _nodes(head):
        delete(node.content)
        node.next = None
    return None