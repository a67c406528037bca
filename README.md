# semcore

Small, dependency-free building blocks for event-driven code in the style of
embedded firmware frameworks.

## What is inside

- `semcore.error`: `Error`, an exception that also serves as a plain value,
  tagged with a class id (`ClassId` or any int up to 32 bits) and an 8-bit
  error code. `Error.is_hardware_error()` is true for class ids inside the
  hardware section.
- `semcore.debug`: printf-style debug output filtered by `DebugLevel`.
  `debug_class(cls, max_level)` enables output for every object of a class,
  `debug_object(obj, level, name)` registers a single object and returns its
  `Debug` entry (with `set_enabled` / `set_disabled`), `internal_debug(...)`
  prints a message if the settings allow it, `level_text` gives the level
  marker such as `(e)` or `(i)`, and `reset_debug(cls)` drops all settings for
  a class. Output goes to standard output.
- `semcore.signals`: `Signal`, `Slot` and `SlotSet`. A `Signal(n_slots)` holds
  up to `n_slots` distinct callbacks and calls them in connection order;
  connecting beyond capacity or twice is ignored. `reconnect(callback)`
  replaces all current connections with one callback.
- `semcore.buffers`: `Buffer` over a caller-supplied list, `LastInBuffer`
  (always writes, overwriting the oldest entry; index 0 is the newest),
  `LastInDmaBuffer` (interleaved channels selected with `set_stride`) and
  `RingBuffer` (FIFO that drops writes when full; `get` on an empty buffer
  raises `IndexError`).
- `semcore.linkedlist`: `LinkedList`, an intrusive doubly linked list of
  `ListNode` subclasses with `push_front`, `push_back`, `pop_front`,
  `pop_back`, `insert`, `erase`, `erase_range` and forward/reverse iteration.
  A node may belong to only one list at a time.
- `semcore.linkedqueue`: `LinkedQueue`, an intrusive FIFO of `QueueNode`
  subclasses with `push`, `pop`, `front`, `back` and iteration.
- `semcore.array`: `Array`, an abstract fixed-size sequence interface, and
  `StdArray(size, *values, default=None)`, with bounds-checked `at`, `fill`
  and a `swap` that only succeeds for equally sized arrays.
- `semcore.i2cscanner`: `I2cScanner`, which probes an address range and emits
  `device_found(address)` for each responding device and `finished()` at the
  end. If the bus is busy when `start_scan` is called, it emits `error` with
  `I2cScannerErrorCode.START_SCAN_IS_BUSY`.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from semcore.signals import Signal
from semcore.buffers import RingBuffer

received = []
data_ready = Signal()
data_ready.connect(received.append)
data_ready(42)
assert received == [42]

ring = RingBuffer([0] * 4)
ring.put(1)
ring.put(2)
assert ring.get() == 1
assert ring.count() == 1
```

## What it does not do

There are no hardware drivers here. `I2cScanner` needs an I2C master object
supplied by the caller that provides `is_busy_writing()`,
`check_address(address)` and two `Signal` attributes: `address_found`, emitted
with no arguments when an address is acknowledged, and `error`, emitted with an
`Error` when it is not. The package has no command-line tool.