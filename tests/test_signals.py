import pytest

from semcore.signals import Signal, Slot, SlotSet


class Recorder:
    def __init__(self):
        self.calls = []

    def on_value(self, *args):
        self.calls.append(args)

    def on_other(self, *args):
        self.calls.append(("other",) + args)


def test_slot_emit_calls_callback_with_arguments():
    rec = Recorder()
    slot = Slot(rec.on_value)
    slot.emit(1, "a")
    assert rec.calls == [(1, "a")]


def test_slot_unconnected_emit_does_nothing():
    slot = Slot()
    assert slot.connected() is False
    slot.emit(5)
    assert slot.connected() is False


def test_slot_disconnect():
    rec = Recorder()
    slot = Slot(rec.on_value)
    assert slot.connected() is True
    slot.disconnect()
    assert slot.connected() is False
    slot.emit(3)
    assert rec.calls == []


def test_slot_equality_of_bound_methods():
    rec = Recorder()
    other = Recorder()
    assert Slot(rec.on_value) == Slot(rec.on_value)
    assert not (Slot(rec.on_value) == Slot(rec.on_other))
    assert not (Slot(rec.on_value) == Slot(other.on_value))
    assert Slot() == Slot()


def test_slot_rejects_non_callable():
    with pytest.raises(TypeError):
        Slot(42)


def test_slotset_ignores_duplicates_and_respects_capacity():
    rec = Recorder()
    a, b, c = Recorder(), Recorder(), Recorder()
    slots = SlotSet(2)
    slots.insert(Slot(rec.on_value))
    slots.insert(Slot(rec.on_value))
    assert len(slots) == 1
    slots.insert(Slot(a.on_value))
    slots.insert(Slot(b.on_value))
    assert len(slots) == 2
    assert list(slots) == [Slot(rec.on_value), Slot(a.on_value)]
    assert Slot(c.on_value) not in list(slots)


def test_slotset_erase_keeps_order():
    a, b, c = Recorder(), Recorder(), Recorder()
    slots = SlotSet(3)
    for r in (a, b, c):
        slots.insert(Slot(r.on_value))
    slots.erase(Slot(b.on_value))
    assert list(slots) == [Slot(a.on_value), Slot(c.on_value)]
    slots.erase(Slot(b.on_value))
    assert len(slots) == 2


def test_slotset_clear_and_empty():
    rec = Recorder()
    slots = SlotSet(2)
    assert slots.empty() is True
    slots.insert(Slot(rec.on_value))
    assert slots.empty() is False
    slots.clear()
    assert slots.empty() is True
    assert len(slots) == 0


def test_slotset_invalid_capacity():
    with pytest.raises(ValueError):
        SlotSet(0)


def test_signal_single_slot_keeps_first_connection():
    first, second = Recorder(), Recorder()
    signal = Signal()
    signal.connect(first.on_value)
    signal.connect(second.on_value)
    signal.emit(7)
    assert first.calls == [(7,)]
    assert second.calls == []


def test_signal_reconnect_replaces_connection():
    first, second = Recorder(), Recorder()
    signal = Signal()
    signal.connect(first.on_value)
    signal.reconnect(second.on_value)
    signal(9)
    assert first.calls == []
    assert second.calls == [(9,)]


def test_signal_disconnect_only_matching():
    first, second = Recorder(), Recorder()
    signal = Signal()
    signal.connect(first.on_value)
    signal.disconnect(second.on_value)
    assert signal.empty() is False
    signal.disconnect(first.on_value)
    assert signal.empty() is True
    signal.emit(1)
    assert first.calls == []


def test_signal_plain_function():
    received = []

    def handler(value):
        received.append(value)

    signal = Signal()
    signal.connect(handler)
    assert signal.empty() is False
    signal(4)
    signal.disconnect(handler)
    assert signal.empty() is True
    signal(5)
    assert received == [4]


def test_signal_multiple_slots_in_connection_order():
    order = []
    signal = Signal(3)
    signal.connect(lambda v: order.append(("a", v)))
    signal.connect(lambda v: order.append(("b", v)))
    signal.emit(2)
    assert order == [("a", 2), ("b", 2)]
    assert len(signal) == 2


def test_signal_multiple_slots_capacity_and_clear():
    recs = [Recorder() for _ in range(3)]
    signal = Signal(2)
    for r in recs:
        signal.connect(r.on_value)
    signal.emit()
    assert [len(r.calls) for r in recs] == [1, 1, 0]
    signal.clear()
    assert signal.empty() is True
    signal.emit()
    assert [len(r.calls) for r in recs] == [1, 1, 0]


def test_signal_duplicate_connection_called_once():
    rec = Recorder()
    signal = Signal(3)
    signal.connect(rec.on_value)
    signal.connect(rec.on_value)
    signal.emit("x")
    assert rec.calls == [("x",)]


def test_signal_reconnect_during_emit_applies_to_next_emit():
    calls = []
    signal = Signal()

    def second(v):
        calls.append(("second", v))

    def first(v):
        calls.append(("first", v))
        signal.reconnect(second)

    signal.connect(first)
    signal.emit(1)
    assert signal.empty() is False
    signal.emit(2)
    assert calls == [("first", 1), ("second", 2)]
    signal.disconnect(second)
    assert signal.empty() is True


def test_signal_invalid_slot_count():
    with pytest.raises(ValueError):
        Signal(0)