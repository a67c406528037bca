"""Fixed-size arrays usable through a common interface independent of their size."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Array(Sequence, Generic[T]):
    """Interface of a fixed-size array that knows its own size.

    Elements can be read and replaced, but the number of elements never
    changes.
    """

    @abstractmethod
    def at(self, pos: int) -> T:
        """Return the element at ``pos``, raising IndexError unless ``0 <= pos < size()``."""

    @abstractmethod
    def __getitem__(self, pos: Any) -> Any:
        ...

    @abstractmethod
    def __setitem__(self, pos: Any, value: Any) -> None:
        ...

    @abstractmethod
    def front(self) -> T:
        """Return the first element."""

    @abstractmethod
    def back(self) -> T:
        """Return the last element."""

    @abstractmethod
    def data(self) -> MutableSequence:
        """Return the storage holding the elements."""

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        ...

    @abstractmethod
    def __reversed__(self) -> Iterator[T]:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def empty(self) -> bool:
        """Return True if the array has no elements."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of elements."""

    @abstractmethod
    def max_size(self) -> int:
        """Return the largest number of elements the array can hold."""

    @abstractmethod
    def fill(self, value: T) -> None:
        """Assign ``value`` to every element."""

    @abstractmethod
    def swap(self, other: "Array[T]") -> bool:
        """Exchange contents with ``other``; return False if the sizes differ."""


class StdArray(Array[T]):
    """Array of exactly ``size`` elements.

    The first elements are taken from ``values``; the remaining ones are set
    to ``default``. Supplying more values than ``size`` is an error.
    """

    def __init__(self, size: int, *values: T, default: Any = None) -> None:
        if size < 0:
            raise ValueError(f"array size must not be negative, got {size}")
        if len(values) > size:
            raise ValueError(f"too many initial values for an array of size {size}: {len(values)}")
        self._items: list = [*values, *([default] * (size - len(values)))]

    def at(self, pos: int) -> T:
        """Return the element at ``pos`` with bounds checking."""
        if not 0 <= pos < len(self._items):
            raise IndexError(f"array position out of range: {pos}")
        return self._items[pos]

    def __getitem__(self, pos: Any) -> Any:
        return self._items[pos]

    def __setitem__(self, pos: Any, value: Any) -> None:
        if isinstance(pos, slice):
            replacement = list(value)
            if len(range(*pos.indices(len(self._items)))) != len(replacement):
                raise ValueError("slice assignment must not change the array size")
            self._items[pos] = replacement
        else:
            self._items[pos] = value

    def front(self) -> T:
        """Return the first element."""
        if not self._items:
            raise IndexError("front of an empty array")
        return self._items[0]

    def back(self) -> T:
        """Return the last element."""
        if not self._items:
            raise IndexError("back of an empty array")
        return self._items[-1]

    def data(self) -> list:
        """Return the list holding the elements; changes to it show in the array."""
        return self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def empty(self) -> bool:
        """Return True if the array has no elements."""
        return not self._items

    def size(self) -> int:
        """Return the number of elements."""
        return len(self._items)

    def max_size(self) -> int:
        """Return the fixed number of elements."""
        return len(self._items)

    def fill(self, value: T) -> None:
        """Assign ``value`` to every element."""
        self._items[:] = [value] * len(self._items)

    def swap(self, other: Array[T]) -> bool:
        """Exchange contents with an equally sized array; return whether it happened."""
        if self.size() != other.size():
            return False
        mine = list(self._items)
        self._items[:] = list(other)
        other.data()[:] = mine
        return True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Array):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_iterable(cls, size: int, values: Iterable[T], default: Any = None) -> "StdArray[T]":
        """Build an array of ``size`` elements from ``values``."""
        return cls(size, *values, default=default)

    def __repr__(self) -> str:
        return f"StdArray({len(self._items)}, {self._items!r})"