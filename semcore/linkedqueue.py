"""Intrusive singly linked FIFO queue whose elements carry their own link."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, Optional, TypeVar


class QueueNode:
    """Base class for objects that can be stored in a :class:`LinkedQueue`.

    A node can belong to at most one queue at a time. The link is maintained
    by the queue; :attr:`next` is a read-only view.
    """

    _queue_next: Optional["QueueNode"] = None
    _queue_owner: Optional["LinkedQueue"] = None

    @property
    def next(self) -> Optional["QueueNode"]:
        """The following element, or None for the last element."""
        return self._queue_next

    def is_in_queue(self, queue: "LinkedQueue") -> bool:
        """Return True if this node is an element of ``queue``."""
        return any(node is self for node in queue)

    def _unlink(self) -> None:
        self._queue_next = None
        self._queue_owner = None


T = TypeVar("T", bound=QueueNode)


class LinkedQueue(Generic[T]):
    """First-in, first-out queue of :class:`QueueNode` objects without extra storage."""

    def __init__(self) -> None:
        self._front: Optional[T] = None
        self._back: Optional[T] = None
        self._size = 0

    def front(self) -> T:
        """Return the first element, the next one to be popped."""
        if self._front is None:
            raise IndexError("front of an empty queue")
        return self._front

    def back(self) -> T:
        """Return the last element, the most recently pushed one."""
        if self._back is None:
            raise IndexError("back of an empty queue")
        return self._back

    def __iter__(self) -> Iterator[T]:
        node = self._front
        while node is not None:
            following = node._queue_next
            yield node
            node = following

    def __len__(self) -> int:
        return self._size

    def __contains__(self, element: object) -> bool:
        return isinstance(element, QueueNode) and element._queue_owner is self

    def empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return self._size == 0

    def push(self, element: T) -> None:
        """Append ``element`` after the current last element."""
        if not isinstance(element, QueueNode):
            raise TypeError(f"queue elements must be QueueNode instances, got {element!r}")
        if element._queue_owner is not None:
            raise ValueError("element is already part of a queue")
        element._queue_next = None
        element._queue_owner = self
        if self._back is None:
            self._front = element
        else:
            self._back._queue_next = element
        self._back = element
        self._size += 1

    def pop(self) -> T:
        """Remove and return the first element."""
        node = self.front()
        self._front = node._queue_next
        if self._front is None:
            self._back = None
        node._unlink()
        self._size -= 1
        return node