"""Lightweight signal/slot mechanism with a fixed number of connections."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional

Callback = Callable[..., None]


class Slot:
    """Holds at most one callback and invokes it on demand.

    Two slots are equal when they hold equal callbacks. Bound methods compare
    equal when they bind the same function to the same object.
    """

    __slots__ = ("_callback",)

    def __init__(self, callback: Optional[Callback] = None) -> None:
        if callback is not None and not callable(callback):
            raise TypeError(f"slot callback must be callable, got {callback!r}")
        self._callback = callback

    def emit(self, *args: Any) -> None:
        """Call the connected callback with ``args``; do nothing if unconnected."""
        callback = self._callback
        if callback is not None:
            callback(*args)

    def connected(self) -> bool:
        """Return True if a callback is connected."""
        return self._callback is not None

    def disconnect(self) -> None:
        """Remove the connected callback."""
        self._callback = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Slot):
            return NotImplemented
        return self._callback == other._callback

    def __hash__(self) -> int:
        return hash(self._callback)

    def __repr__(self) -> str:
        return f"Slot({self._callback!r})"


class SlotSet:
    """An ordered set of at most ``capacity`` slots.

    Inserting into a full set, or inserting a slot equal to one already
    present, does nothing.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._slots: list[Slot] = []

    def insert(self, slot: Slot) -> None:
        """Add ``slot`` unless an equal slot is present or the set is full."""
        if slot in self._slots:
            return
        if len(self._slots) < self.capacity:
            self._slots.append(slot)

    def erase(self, slot: Slot) -> None:
        """Remove the slot equal to ``slot``, keeping the order of the rest."""
        try:
            self._slots.remove(slot)
        except ValueError:
            pass

    def clear(self) -> None:
        """Remove all slots."""
        self._slots.clear()

    def empty(self) -> bool:
        """Return True if the set holds no slots."""
        return not self._slots

    def __iter__(self) -> Iterator[Slot]:
        return iter(tuple(self._slots))

    def __len__(self) -> int:
        return len(self._slots)


class Signal:
    """A signal that calls up to ``n_slots`` connected callbacks when emitted.

    Callbacks are called in the order they were connected. Connecting beyond
    the capacity, or connecting the same callback twice, has no effect.
    """

    def __init__(self, n_slots: int = 1) -> None:
        self._set = SlotSet(n_slots)

    @property
    def n_slots(self) -> int:
        """Maximum number of simultaneous connections."""
        return self._set.capacity

    def connect(self, callback: Callback) -> None:
        """Connect ``callback`` if there is room and it is not yet connected."""
        self._set.insert(Slot(callback))

    def reconnect(self, callback: Callback) -> None:
        """Drop all existing connections and connect ``callback`` alone."""
        slot = Slot(callback)
        self._set.clear()
        self._set.insert(slot)

    def disconnect(self, callback: Callback) -> None:
        """Disconnect ``callback`` if it is connected."""
        self._set.erase(Slot(callback))

    def clear(self) -> None:
        """Disconnect all callbacks."""
        self._set.clear()

    def emit(self, *args: Any) -> None:
        """Call every connected callback with ``args``."""
        for slot in self._set:
            slot.emit(*args)

    def __call__(self, *args: Any) -> None:
        self.emit(*args)

    def empty(self) -> bool:
        """Return True if nothing is connected."""
        return self._set.empty()

    def __len__(self) -> int:
        return len(self._set)