import pytest

from semcore.linkedlist import LinkedList, ListNode


class Item(ListNode):
    def __init__(self, value):
        self.value = value


def values(lst):
    return [item.value for item in lst]


def make(*vals):
    lst = LinkedList()
    items = [Item(v) for v in vals]
    for item in items:
        lst.push_back(item)
    return lst, items


def test_empty_list():
    lst = LinkedList()
    assert lst.empty()
    assert len(lst) == 0
    assert list(lst) == []
    with pytest.raises(IndexError):
        lst.front()
    with pytest.raises(IndexError):
        lst.back()


def test_push_back_keeps_order():
    lst, items = make("a", "b", "c")
    assert values(lst) == ["a", "b", "c"]
    assert lst.front() is items[0]
    assert lst.back() is items[2]
    assert len(lst) == 3
    assert not lst.empty()


def test_push_front_reverses_order():
    lst = LinkedList()
    for v in ("a", "b", "c"):
        lst.push_front(Item(v))
    assert values(lst) == ["c", "b", "a"]


def test_reversed_iteration():
    lst, _ = make(1, 2, 3)
    assert [i.value for i in reversed(lst)] == [3, 2, 1]


def test_links_between_nodes():
    lst, (a, b, c) = make(1, 2, 3)
    assert a.previous is None
    assert a.next is b
    assert b.previous is a
    assert b.next is c
    assert c.next is None


def test_is_in_a_list():
    node = Item(1)
    assert not node.is_in_a_list()
    lst = LinkedList()
    lst.push_back(node)
    assert node.is_in_a_list()
    assert node in lst
    lst.pop_back()
    assert not node.is_in_a_list()


def test_node_cannot_join_two_lists():
    lst, (a,) = make(1)
    other = LinkedList()
    with pytest.raises(ValueError):
        other.push_back(a)
    with pytest.raises(ValueError):
        lst.push_front(a)


def test_pop_front_and_back():
    lst, (a, b, c) = make(1, 2, 3)
    assert lst.pop_front() is a
    assert lst.pop_back() is c
    assert values(lst) == [2]
    assert b.previous is None and b.next is None
    assert lst.pop_front() is b
    assert lst.empty()
    with pytest.raises(IndexError):
        lst.pop_back()


def test_insert_in_middle():
    lst, (a, b, c) = make(1, 2, 3)
    new = Item(9)
    assert lst.insert(b, new) is new
    assert values(lst) == [1, 9, 2, 3]
    assert len(lst) == 4
    assert [i.value for i in reversed(lst)] == [3, 2, 9, 1]


def test_insert_at_front_and_end():
    lst, (a,) = make(1)
    lst.insert(a, Item(0))
    lst.insert(None, Item(2))
    assert values(lst) == [0, 1, 2]


def test_insert_into_empty_list():
    lst = LinkedList()
    node = Item(5)
    lst.insert(None, node)
    assert lst.front() is node and lst.back() is node


def test_insert_at_foreign_position():
    lst, _ = make(1)
    other, (x,) = make(2)
    with pytest.raises(ValueError):
        lst.insert(x, Item(3))


def test_erase_returns_following():
    lst, (a, b, c) = make(1, 2, 3)
    assert lst.erase(b) is c
    assert values(lst) == [1, 3]
    assert a.next is c and c.previous is a
    assert not b.is_in_a_list()
    assert lst.erase(c) is None
    assert lst.erase(a) is None
    assert lst.empty()


def test_erase_foreign_element():
    lst, _ = make(1)
    with pytest.raises(ValueError):
        lst.erase(Item(2))


def test_erase_range_inclusive():
    lst, (a, b, c, d, e) = make(1, 2, 3, 4, 5)
    assert lst.erase_range(b, d) is e
    assert values(lst) == [1, 5]
    assert len(lst) == 2


def test_erase_range_to_end():
    lst, (a, b, c) = make(1, 2, 3)
    assert lst.erase_range(b, None) is None
    assert values(lst) == [1]


def test_erase_range_wrong_order():
    lst, (a, b, c) = make(1, 2, 3)
    with pytest.raises(ValueError):
        lst.erase_range(c, a)
    assert values(lst) == [1, 2, 3]


def test_clear_releases_nodes():
    lst, items = make(1, 2)
    lst.clear()
    assert lst.empty()
    assert all(not i.is_in_a_list() for i in items)
    lst.push_back(items[1])
    assert values(lst) == [2]


def test_iteration_survives_removal():
    lst, items = make(1, 2, 3, 4)
    for item in lst:
        if item.value % 2 == 0:
            lst.erase(item)
    assert values(lst) == [1, 3]