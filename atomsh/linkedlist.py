"""A singly linked list of nodes holding arbitrary content.

Functions that may replace the first node of a list return the new head.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One list cell: its content and the following node."""

    content: Any
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the contents of this node and all nodes after it."""
        for node in _nodes(self):
            yield node.content


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    while head is not None:
        following = head.next
        yield head
        head = following


def lstnew(content: Any) -> Node:
    """Create a lone node holding ``content``."""
    return Node(content)


def lstadd_front(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Put ``node`` before ``head`` and return the new head."""
    if node is None:
        return head
    node.next = head
    return node


def lstadd_back(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Append ``node`` after the last node and return the head."""
    if node is None:
        return head
    if head is None:
        return node
    last = lstlast(head)
    assert last is not None
    last.next = node
    return head


def lstsize(head: Optional[Node]) -> int:
    """Number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def lstlast(head: Optional[Node]) -> Optional[Node]:
    """The last node of the list, or ``None`` for an empty list."""
    last = None
    for last in _nodes(head):
        pass
    return last


def lstdelone(node: Optional[Node], delete: Optional[Callable[[Any], None]]) -> None:
    """Release one node, handing its content to ``delete``; the rest is untouched."""
    if node is None or delete is None:
        return
    delete(node.content)
    node.content = None
    node.next = None


def lstclear(
    head: Optional[Node], delete: Optional[Callable[[Any], None]]
) -> Optional[Node]:
    """Release every node, handing each content to ``delete`` in order.

    Returns the new head: ``None``, or ``head`` itself when no ``delete`` is
    given and nothing was done.
    """
    if delete is None:
        return head
    for node in _nodes(head):
        lstdelone(node, delete)
    return None


def lstiter(head: Optional[Node], func: Callable[[Any], None]) -> None:
    """Call ``func`` on the content of every node in order."""
    for node in _nodes(head):
        func(node.content)


def lstmap(
    head: Optional[Node],
    func: Optional[Callable[[Any], Any]],
    delete: Optional[Callable[[Any], None]],
) -> Optional[Node]:
    """Build a new list of ``func`` applied to each content.

    If ``func`` raises, the contents already produced are handed to
    ``delete`` and the error propagates.
    """
    if head is None or func is None or delete is None:
        return None
    new_head: Optional[Node] = None
    tail: Optional[Node] = None
    try:
        for content in head:
            node = Node(func(content))
            if tail is None:
                new_head = node
            else:
                tail.next = node
            tail = node
    except Exception:
        lstclear(new_head, delete)
        raise
    return new_head