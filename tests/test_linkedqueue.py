import pytest

from semcore.linkedqueue import LinkedQueue, QueueNode


class Item(QueueNode):
    def __init__(self, value):
        self.value = value


def make_queue(*values):
    queue = LinkedQueue()
    items = [Item(v) for v in values]
    for item in items:
        queue.push(item)
    return queue, items


def test_new_queue_is_empty():
    queue = LinkedQueue()
    assert queue.empty()
    assert len(queue) == 0
    assert list(queue) == []


def test_push_keeps_fifo_order():
    queue, items = make_queue(1, 2, 3)
    assert [i.value for i in queue] == [1, 2, 3]
    assert len(queue) == 3
    assert not queue.empty()


def test_front_and_back():
    queue, items = make_queue("a", "b", "c")
    assert queue.front() is items[0]
    assert queue.back() is items[2]


def test_pop_returns_elements_in_push_order():
    queue, items = make_queue(1, 2, 3)
    popped = [queue.pop() for _ in range(3)]
    assert popped == items
    assert queue.empty()


def test_pop_single_element_resets_front_and_back():
    queue, items = make_queue(7)
    assert queue.pop() is items[0]
    with pytest.raises(IndexError):
        queue.front()
    with pytest.raises(IndexError):
        queue.back()


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        LinkedQueue().pop()


def test_next_links_follow_order():
    queue, items = make_queue(1, 2, 3)
    assert items[0].next is items[1]
    assert items[1].next is items[2]
    assert items[2].next is None


def test_popped_node_is_unlinked_and_can_be_pushed_again():
    queue, items = make_queue(1, 2)
    first = queue.pop()
    assert first.next is None
    assert not first.is_in_queue(queue)
    queue.push(first)
    assert [i.value for i in queue] == [2, 1]
    assert queue.back() is first


def test_is_in_queue():
    queue, items = make_queue(1, 2)
    other = LinkedQueue()
    stranger = Item(3)
    assert items[0].is_in_queue(queue)
    assert items[1].is_in_queue(queue)
    assert not items[0].is_in_queue(other)
    assert not stranger.is_in_queue(queue)


def test_contains():
    queue, items = make_queue(1)
    assert items[0] in queue
    assert Item(2) not in queue


def test_push_node_already_in_a_queue_raises():
    queue, items = make_queue(1)
    other = LinkedQueue()
    with pytest.raises(ValueError):
        other.push(items[0])
    assert other.empty()
    assert len(queue) == 1


def test_push_non_node_raises():
    with pytest.raises(TypeError):
        LinkedQueue().push(object())


def test_interleaved_push_and_pop():
    queue = LinkedQueue()
    a, b, c = Item("a"), Item("b"), Item("c")
    queue.push(a)
    queue.push(b)
    assert queue.pop() is a
    queue.push(c)
    assert [i.value for i in queue] == ["b", "c"]
    assert queue.front() is b
    assert queue.back() is c
    assert len(queue) == 2