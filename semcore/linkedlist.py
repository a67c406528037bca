"""Intrusive doubly linked list whose elements carry their own links."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, Optional, TypeVar


class ListNode:
    """Base class for objects that can be stored in a :class:`LinkedList`.

    A node can belong to at most one list at a time. The links are maintained
    by the list; :attr:`next` and :attr:`previous` are read-only views.
    """

    _list_next: Optional["ListNode"] = None
    _list_previous: Optional["ListNode"] = None
    _list_owner: Optional["LinkedList"] = None

    @property
    def next(self) -> Optional["ListNode"]:
        """The following element, or None for the last element."""
        return self._list_next

    @property
    def previous(self) -> Optional["ListNode"]:
        """The preceding element, or None for the first element."""
        return self._list_previous

    def is_in_a_list(self) -> bool:
        """Return True if the node currently belongs to a list."""
        return self._list_owner is not None

    def _unlink(self) -> None:
        self._list_next = None
        self._list_previous = None
        self._list_owner = None


T = TypeVar("T", bound=ListNode)


class LinkedList(Generic[T]):
    """Doubly linked list of :class:`ListNode` objects without extra storage.

    Positions are the elements themselves; ``None`` stands for the position
    past the last element.
    """

    def __init__(self) -> None:
        self._front: Optional[T] = None
        self._back: Optional[T] = None
        self._size = 0

    def front(self) -> T:
        """Return the first element."""
        if self._front is None:
            raise IndexError("front of an empty list")
        return self._front

    def back(self) -> T:
        """Return the last element."""
        if self._back is None:
            raise IndexError("back of an empty list")
        return self._back

    def __iter__(self) -> Iterator[T]:
        node = self._front
        while node is not None:
            following = node._list_next
            yield node
            node = following

    def __reversed__(self) -> Iterator[T]:
        node = self._back
        while node is not None:
            preceding = node._list_previous
            yield node
            node = preceding

    def __len__(self) -> int:
        return self._size

    def __contains__(self, element: object) -> bool:
        return isinstance(element, ListNode) and element._list_owner is self

    def empty(self) -> bool:
        """Return True if the list holds no elements."""
        return self._size == 0

    def clear(self) -> None:
        """Remove all elements, leaving the list empty."""
        for node in list(self):
            node._unlink()
        self._front = None
        self._back = None
        self._size = 0

    def _check_free(self, element: T) -> None:
        if not isinstance(element, ListNode):
            raise TypeError(f"list elements must be ListNode instances, got {element!r}")
        if element.is_in_a_list():
            raise ValueError("element is already part of a list")

    def _check_member(self, element: Optional[T]) -> T:
        if element is None or element._list_owner is not self:
            raise ValueError("element is not part of this list")
        return element

    def insert(self, position: Optional[T], element: T) -> T:
        """Insert ``element`` before ``position`` (None appends) and return it."""
        if position is None:
            self.push_back(element)
            return element
        self._check_member(position)
        if position is self._front:
            self.push_front(element)
            return element
        self._check_free(element)
        preceding = position._list_previous
        element._list_previous = preceding
        element._list_next = position
        element._list_owner = self
        preceding._list_next = element
        position._list_previous = element
        self._size += 1
        return element

    def erase(self, position: T) -> Optional[T]:
        """Remove ``position`` and return the element that followed it."""
        node = self._check_member(position)
        following = node._list_next
        if node is self._front:
            self.pop_front()
        elif node is self._back:
            self.pop_back()
        else:
            preceding = node._list_previous
            preceding._list_next = following
            following._list_previous = preceding
            node._unlink()
            self._size -= 1
        return following

    def erase_range(self, first: T, last: Optional[T]) -> Optional[T]:
        """Remove the elements from ``first`` through ``last`` inclusive.

        With ``last`` set to None every element from ``first`` to the end is
        removed. Returns the element that followed the last removed one.
        """
        self._check_member(first)
        if last is not None:
            self._check_member(last)
            node: Optional[T] = first
            while node is not None and node is not last:
                node = node._list_next
            if node is None:
                raise ValueError("last does not follow first in this list")
        current: Optional[T] = first
        while current is not None and current is not last:
            current = self.erase(current)
        if current is None:
            return None
        return self.erase(current)

    def push_back(self, element: T) -> None:
        """Append ``element`` after the current last element."""
        self._check_free(element)
        element._list_owner = self
        element._list_next = None
        element._list_previous = self._back
        if self._back is None:
            self._front = element
        else:
            self._back._list_next = element
        self._back = element
        self._size += 1

    def push_front(self, element: T) -> None:
        """Prepend ``element`` before the current first element."""
        self._check_free(element)
        element._list_owner = self
        element._list_previous = None
        element._list_next = self._front
        if self._front is None:
            self._back = element
        else:
            self._front._list_previous = element
        self._front = element
        self._size += 1

    def pop_back(self) -> T:
        """Remove and return the last element."""
        node = self.back()
        self._back = node._list_previous
        if self._back is None:
            self._front = None
        else:
            self._back._list_next = None
        node._unlink()
        self._size -= 1
        return node

    def pop_front(self) -> T:
        """Remove and return the first element."""
        node = self.front()
        self._front = node._list_next
        if self._front is None:
            self._back = None
        else:
            self._front._list_previous = None
        node._unlink()
        self._size -= 1
        return node