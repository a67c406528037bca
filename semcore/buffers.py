"""Fixed-capacity buffers over caller-supplied storage.

Each buffer works on a mutable sequence handed to it (usually a list). The
buffer never grows the storage; it only reads and overwrites its elements.
"""

from __future__ import annotations

import threading
from collections.abc import MutableSequence
from typing import Any, Optional


class Buffer:
    """Base buffer giving indexed access to its storage."""

    def __init__(self, data: Optional[MutableSequence] = None) -> None:
        self._lock = threading.RLock()
        self._data: MutableSequence = data if data is not None else []

    def set_buffer(self, data: MutableSequence) -> None:
        """Replace the storage; empty or missing storage is ignored."""
        if data is not None and len(data) > 0:
            with self._lock:
                self._data = data

    def _capacity(self) -> int:
        return len(self._data)

    def _require_storage(self) -> int:
        capacity = self._capacity()
        if capacity == 0:
            raise IndexError("buffer has no storage")
        return capacity

    def __getitem__(self, pos: int) -> Any:
        if not 0 <= pos < self._capacity():
            raise IndexError(f"buffer position out of range: {pos}")
        with self._lock:
            return self._data[pos]

    def size(self) -> int:
        """Return the capacity of the storage."""
        return self._capacity()

    def count(self) -> int:
        """Return the number of entries; for a plain buffer this is its size."""
        return self._capacity()

    def data(self) -> MutableSequence:
        """Return the underlying storage."""
        return self._data


class LastInBuffer(Buffer):
    """Circular buffer that always accepts data, overwriting the oldest entry.

    Index 0 is the most recently written entry, index 1 the one before, and so
    on; positions wrap around the capacity.
    """

    def __init__(self, data: Optional[MutableSequence] = None) -> None:
        super().__init__(data)
        self._pos = 0

    def put(self, value: Any) -> None:
        """Write ``value`` at the current position and advance it."""
        capacity = self._require_storage()
        with self._lock:
            self._data[self._pos] = value
            self._pos = (self._pos + 1) % capacity

    def fill(self, value: Any) -> None:
        """Set every element of the storage to ``value``."""
        with self._lock:
            self._data[:] = [value] * self._capacity()

    def __getitem__(self, pos: int) -> Any:
        if pos < 0:
            raise IndexError(f"buffer position out of range: {pos}")
        capacity = self._require_storage()
        pos %= capacity
        with self._lock:
            return self._data[(self._pos - (pos + 1)) % capacity]

    def set_pos(self, pos: int) -> None:
        """Set the write position, wrapped to the capacity."""
        capacity = self._require_storage()
        with self._lock:
            self._pos = pos % capacity

    def pos(self) -> int:
        """Return the position the next value will be written to."""
        return self._pos


class LastInDmaBuffer(LastInBuffer):
    """Several interleaved last-in buffers sharing one storage.

    With a stride of ``n`` the storage holds ``n`` channels side by side, as a
    DMA sampling ``n`` inputs would write them. Indexing addresses the entries
    of one channel, newest first.
    """

    def __init__(self, data: Optional[MutableSequence] = None) -> None:
        super().__init__(data)
        self._stride = 0

    def _require_stride(self) -> int:
        if self._stride <= 0:
            raise ValueError("stride is not set")
        return self._stride

    def put(self, value: Any) -> None:
        """Write ``value`` and skip ahead by the stride."""
        stride = self._require_stride()
        super().put(value)
        with self._lock:
            self.set_pos(self.pos() + stride - 1)

    def __getitem__(self, pos: int) -> Any:
        if pos < 0:
            raise IndexError(f"buffer position out of range: {pos}")
        stride = self._require_stride()
        return super().__getitem__((pos + 1) * stride - 1)

    def set_stride(self, stride: int) -> None:
        """Set the distance between two entries of the same input."""
        if stride < 1:
            raise ValueError(f"stride must be at least 1, got {stride}")
        self._stride = stride

    def size(self) -> int:
        """Return the number of entries per input."""
        return self._capacity() // self._require_stride()

    def count(self) -> int:
        """Return the number of entries per input; equal to :meth:`size`."""
        return self.size()


class RingBuffer(Buffer):
    """Classic FIFO circular buffer; writes to a full buffer are dropped.

    Indexing is relative to the read position: index 1 is the oldest unread
    entry, index ``count()`` the newest, and index 0 the last entry read.
    """

    def __init__(self, data: Optional[MutableSequence] = None) -> None:
        super().__init__(data)
        self._counter = 0
        self._write_pos = 0
        self._read_pos = 0

    def put(self, value: Any) -> None:
        """Store ``value`` unless the buffer is full."""
        if self.is_full():
            return
        with self._lock:
            self._counter += 1
            self._write_pos = (self._write_pos + 1) % self._capacity()
            self._data[self._write_pos] = value

    def get(self) -> Any:
        """Remove and return the oldest unread entry."""
        if self.is_empty():
            raise IndexError("get from an empty ring buffer")
        with self._lock:
            self._counter -= 1
            self._read_pos = (self._read_pos + 1) % self._capacity()
            return self._data[self._read_pos]

    def __getitem__(self, pos: int) -> Any:
        if self.is_empty() or pos < 0 or pos > self._counter:
            raise IndexError(f"ring buffer position out of range: {pos}")
        with self._lock:
            return self._data[(self._read_pos + pos) % self._capacity()]

    def is_full(self) -> bool:
        """Return True if no more entries can be stored."""
        with self._lock:
            return self._counter == self._capacity()

    def is_empty(self) -> bool:
        """Return True if there is no unread entry."""
        with self._lock:
            return self._counter == 0

    def count(self) -> int:
        """Return the number of unread entries."""
        with self._lock:
            return self._counter

    def reset(self) -> None:
        """Forget all entries; the storage itself is left unchanged."""
        with self._lock:
            self._read_pos = 0
            self._write_pos = 0
            self._counter = 0